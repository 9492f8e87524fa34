"""
Personality-type compatibility table.

Maps each of the 16 MBTI codes to an ordered list of up to three
preferred counterpart codes, most compatible first. The table is an
immutable value; scoring functions receive it as an argument so tests
and deployments can swap in their own rankings.

Affinity Formula:
    rank r (0-based) of the mentor's type in the mentee's list
    affinity = (MAX_RANKED_PAIRINGS - r) / MAX_RANKED_PAIRINGS
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

import yaml

from ..records.schema import MBTI_TYPES, normalize_mbti

logger = logging.getLogger(__name__)

MAX_RANKED_PAIRINGS = 3

DEFAULT_MBTI_PAIRINGS: Dict[str, List[str]] = {
    "ENFJ": ["INFJ", "ENTJ", "ENFP"],
    "ENFP": ["INFJ", "ENFJ", "INTP"],
    "ENTJ": ["INTJ", "ESTJ", "ENTP"],
    "ENTP": ["INTP", "ENTJ", "ENFJ"],
    "ESFJ": ["ISFJ", "ENFJ", "ESTJ"],
    "ESFP": ["ISFP", "ESFJ", "ENFJ"],
    "ESTJ": ["ISTJ", "ENTJ", "ENTP"],
    "ESTP": ["ISTP", "ENTJ", "ESTJ"],
    "INFJ": ["ENFJ", "INTJ", "ENTJ"],
    "INFP": ["INFJ", "ENFJ", "ENFP"],
    "INTJ": ["ENTP", "ENTJ", "INTP"],
    "INTP": ["ENTP", "INTJ", "ENFP"],
    "ISFJ": ["ESFJ", "ENFJ", "ISTJ"],
    "ISFP": ["ESFP", "INFP", "ENFP"],
    "ISTJ": ["ESTJ", "ENTJ", "ISFJ"],
    "ISTP": ["ESTP", "ISTJ", "INTP"],
}


class CompatibilityTable(Mapping[str, Tuple[str, ...]]):
    """
    Read-only personality-type affinity rankings.

    Behaves like a mapping from type code to a tuple of ranked counterpart
    codes. Lookups with ``rank_of`` never raise for unknown codes.
    """

    def __init__(self, pairings: Mapping[str, List[str]]):
        _validate_pairings(pairings)
        frozen = {
            normalize_mbti(code): tuple(normalize_mbti(c) for c in ranked)
            for code, ranked in pairings.items()
        }
        self._pairings = MappingProxyType(frozen)

    def __getitem__(self, code: str) -> Tuple[str, ...]:
        return self._pairings[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._pairings)

    def __len__(self) -> int:
        return len(self._pairings)

    def __repr__(self) -> str:
        return f"CompatibilityTable({len(self)} types)"

    def rank_of(self, mentee_type: str, mentor_type: str) -> Optional[int]:
        """
        Zero-based rank of mentor_type in mentee_type's preference list.

        Returns None when the mentee's type is not a table key or the
        mentor's type is not listed.
        """
        ranked = self._pairings.get(mentee_type)
        if not ranked or mentor_type not in ranked:
            return None
        return ranked.index(mentor_type)

    def to_dict(self) -> Dict[str, List[str]]:
        return {code: list(ranked) for code, ranked in self._pairings.items()}


def _validate_pairings(pairings: Mapping[str, List[str]]) -> None:
    """
    Validate a pairing mapping.

    Checks:
    - Keys and listed codes are strings
    - Each list has at most MAX_RANKED_PAIRINGS entries without repeats

    Raises:
        ValueError: If validation fails
    """
    if not isinstance(pairings, Mapping):
        raise ValueError("Compatibility pairings must be a mapping of type code to list")

    for code, ranked in pairings.items():
        if not isinstance(code, str):
            raise ValueError(f"Type code must be a string, got {code!r}")
        if not isinstance(ranked, (list, tuple)):
            raise ValueError(f"Pairings for '{code}' must be a list")
        if len(ranked) > MAX_RANKED_PAIRINGS:
            raise ValueError(
                f"Pairings for '{code}' list {len(ranked)} types; at most {MAX_RANKED_PAIRINGS} allowed"
            )
        if not all(isinstance(c, str) for c in ranked):
            raise ValueError(f"Pairings for '{code}' must contain type codes")
        normalized = [normalize_mbti(c) for c in ranked]
        if len(set(normalized)) != len(normalized):
            raise ValueError(f"Pairings for '{code}' contain duplicates: {ranked}")

    unknown = [normalize_mbti(c) for c in pairings if normalize_mbti(c) not in MBTI_TYPES]
    if unknown:
        logger.warning(f"Compatibility table has non-standard type codes: {unknown}")


def load_compatibility_table(filepath: str) -> CompatibilityTable:
    """
    Load a compatibility table from YAML.

    The file holds a ``pairings`` mapping:
        pairings:
          INTJ: [ENTP, ENTJ, INTP]
          ...

    Args:
        filepath: Path to the YAML file

    Returns:
        CompatibilityTable instance

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the table is malformed
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Compatibility table not found: {filepath}")

    logger.info(f"Loading compatibility table from {filepath}")
    with open(filepath, "r") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or "pairings" not in data:
        raise ValueError(f"Compatibility table missing 'pairings' mapping: {filepath}")

    table = CompatibilityTable(data["pairings"])
    logger.info(f"Loaded compatibility rankings for {len(table)} types")
    return table


DEFAULT_COMPATIBILITY_TABLE = CompatibilityTable(DEFAULT_MBTI_PAIRINGS)
