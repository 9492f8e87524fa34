"""Configuration loading for the matching tools."""

from .loader import load_config, validate_config, get_config_value, default_config, resolve_paths

__all__ = ["load_config", "validate_config", "get_config_value", "default_config", "resolve_paths"]
