"""
Configuration loading and validation.

This module handles loading of YAML configuration files and
validates that all required fields are present.
"""

import copy
import logging
import math
from pathlib import Path
from typing import Dict, Any, List, Union

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "global": {"log_level": "INFO"},
    "data": {
        "mentors_path": "data/sample_mentors.csv",
        "mentees_path": "data/sample_mentees.csv",
    },
    "scoring": {
        "variant": "interests",
        "compatibility_table": None,
        "weights": {
            "skills": 0.5,
            "location": 0.2,
            "interests": 0.1,
            "industry_needs": 0.1,
            "mbti": 0.1,
        },
    },
    "ranking": {"top_n": 3},
    "output": {"path": "outputs/matches.csv", "report_path": None},
}


def load_config(filepath: str) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        filepath: Path to the YAML configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is invalid
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {filepath}")

    logger.info(f"Loading configuration from {filepath}")
    with open(filepath, "r") as f:
        config = yaml.safe_load(f)

    if config is None:
        raise ValueError(f"Configuration file is empty: {filepath}")

    return config


def default_config() -> Dict[str, Any]:
    """Return a fresh copy of the built-in configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Args:
        config: Configuration dictionary

    Returns:
        List of warning/error messages (empty if valid)
    """
    issues = []

    required_sections = ["global", "scoring", "ranking"]
    for section in required_sections:
        if section not in config:
            issues.append(f"Missing required section: {section}")

    if "scoring" in config:
        scoring = config["scoring"] or {}
        variant = scoring.get("variant", "interests")
        if variant not in ("interests", "experience"):
            issues.append(f"Unknown scoring variant: {variant}")

        weights = scoring.get("weights")
        if not weights:
            issues.append("Missing scoring.weights")
        else:
            for name, value in weights.items():
                if not isinstance(value, (int, float)) or isinstance(value, bool):
                    issues.append(f"Weight '{name}' must be a number, got {value!r}")
                elif not math.isfinite(value) or value < 0:
                    issues.append(f"Weight '{name}' must be non-negative, got {value}")
                elif value > 1:
                    issues.append(f"Weight '{name}' is outside the recommended [0, 1] range: {value}")

            if variant == "interests" and "experience" in weights:
                issues.append("Weight 'experience' is ignored by the 'interests' variant")
            if variant == "experience" and "interests" in weights:
                issues.append("Weight 'interests' is ignored by the 'experience' variant")

    if "ranking" in config:
        top_n = (config["ranking"] or {}).get("top_n", 3)
        if top_n is not None and (not isinstance(top_n, int) or top_n < 0):
            issues.append(f"ranking.top_n must be a non-negative integer, got {top_n!r}")

    return issues


def get_config_value(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., "scoring.weights.skills")
        default: Default value if path doesn't exist

    Returns:
        Configuration value or default
    """
    keys = path.split(".")
    value = config
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value


PATH_KEYS = ["data.mentors_path", "data.mentees_path", "scoring.compatibility_table"]


def resolve_paths(config: Dict[str, Any], root: Union[str, Path]) -> Dict[str, Any]:
    """
    Resolve relative input paths against a project root.

    Args:
        config: Configuration dictionary
        root: Directory that relative paths in the config are relative to

    Returns:
        A copy of the config with data and compatibility table paths absolute
    """
    resolved = copy.deepcopy(config)
    for key in PATH_KEYS:
        section, name = key.split(".")
        value = get_config_value(resolved, key)
        if value and not Path(value).is_absolute():
            resolved[section][name] = str(Path(root) / value)
    return resolved
