"""
Match weight configuration.

Weights control how much each attribute contributes to the aggregate
score. They are not normalized on write; the aggregator divides by the
sum of the active weights, so any non-negative values are accepted.

Two attribute sets exist:
- "interests" (default): skills, location, interests, industry_needs, mbti
- "experience": skills, location, experience, industry_needs, mbti
"""

import json
import logging
import math
from enum import Enum
from typing import Dict, Any, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

SKILLS = "skills"
LOCATION = "location"
INTERESTS = "interests"
EXPERIENCE = "experience"
INDUSTRY_NEEDS = "industry_needs"
MBTI = "mbti"

KNOWN_ATTRIBUTES: Tuple[str, ...] = (SKILLS, LOCATION, INTERESTS, EXPERIENCE, INDUSTRY_NEEDS, MBTI)

# Wire names used by the upload UI and older configs
ATTRIBUTE_ALIASES = {
    "industryNeeds": INDUSTRY_NEEDS,
    "industry_specific_needs": INDUSTRY_NEEDS,
    "experience_level": EXPERIENCE,
}


class ScoringVariant(Enum):
    """Which attribute set the aggregator scores."""
    INTERESTS = "interests"
    EXPERIENCE = "experience"

    @property
    def attributes(self) -> Tuple[str, ...]:
        if self is ScoringVariant.EXPERIENCE:
            return (SKILLS, EXPERIENCE, INDUSTRY_NEEDS, MBTI, LOCATION)
        return (SKILLS, INTERESTS, INDUSTRY_NEEDS, MBTI, LOCATION)


DEFAULT_WEIGHTS: Dict[str, float] = {
    SKILLS: 0.5,
    LOCATION: 0.2,
    INTERESTS: 0.1,
    INDUSTRY_NEEDS: 0.1,
    MBTI: 0.1,
}


def canonical_attribute(name: str) -> Optional[str]:
    """Map an attribute name or alias to its canonical name, or None."""
    name = ATTRIBUTE_ALIASES.get(name, name)
    return name if name in KNOWN_ATTRIBUTES else None


class MatchWeights:
    """
    Mutable per-attribute weights.

    Missing attributes read as 0.0, so they add nothing to either the
    numerator or the denominator of the aggregate score.
    """

    def __init__(self, weights: Optional[Mapping[str, float]] = None):
        self._weights: Dict[str, float] = {}
        for name, value in (weights or {}).items():
            self.set(name, value)

    def get(self, attribute: str) -> float:
        """Weight for attribute, 0.0 when not set."""
        key = canonical_attribute(attribute)
        if key is None:
            return 0.0
        return self._weights.get(key, 0.0)

    def set(self, attribute: str, value: float) -> None:
        """
        Set the weight for attribute.

        Raises:
            KeyError: If the attribute is not a known match attribute
        """
        key = canonical_attribute(attribute)
        if key is None:
            raise KeyError(f"Unknown match attribute: {attribute}")
        self._weights[key] = float(value)

    def effective(self, attribute: str) -> float:
        """Weight used for scoring: negative and non-finite weights count as 0."""
        value = self.get(attribute)
        if not math.isfinite(value) or value < 0:
            return 0.0
        return value

    def total(self, attributes: Tuple[str, ...]) -> float:
        """Sum of the effective weights for the given attributes."""
        return math.fsum(self.effective(a) for a in attributes)

    def validate(self, max_value: Optional[float] = None) -> None:
        """
        Check weights at an input boundary.

        Args:
            max_value: Optional upper bound (e.g. 1.0 for slider input)

        Raises:
            ValueError: On negative, non-finite or too-large weights
        """
        for name, value in self._weights.items():
            if not math.isfinite(value):
                raise ValueError(f"Weight '{name}' must be finite, got {value}")
            if value < 0:
                raise ValueError(f"Weight '{name}' must be non-negative, got {value}")
            if max_value is not None and value > max_value:
                raise ValueError(f"Weight '{name}' must be at most {max_value}, got {value}")

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary."""
        return dict(self._weights)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatchWeights):
            return NotImplemented
        return self._weights == other._weights

    def __repr__(self) -> str:
        return f"MatchWeights({self._weights})"

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "MatchWeights":
        """Create from dictionary, ignoring unrecognized keys."""
        weights = cls()
        for name, value in d.items():
            if canonical_attribute(name) is None:
                logger.debug(f"Ignoring unrecognized weight key: {name}")
                continue
            weights.set(name, value)
        return weights

    @classmethod
    def default(cls) -> "MatchWeights":
        return cls(DEFAULT_WEIGHTS)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "MatchWeights":
        """Create from main config dictionary."""
        weights = config.get("scoring", {}).get("weights")
        if not weights:
            return cls.default()
        return cls.from_dict(weights)

    def save(self, filepath: str) -> None:
        """Save to JSON file."""
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved match weights to {filepath}")

    @classmethod
    def load(cls, filepath: str) -> "MatchWeights":
        """Load from JSON file."""
        with open(filepath, "r") as f:
            d = json.load(f)
        return cls.from_dict(d)


def variant_from_config(config: Dict[str, Any]) -> ScoringVariant:
    """Read scoring.variant, defaulting to the interests variant."""
    name = config.get("scoring", {}).get("variant", ScoringVariant.INTERESTS.value)
    return ScoringVariant(name)
