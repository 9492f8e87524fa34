"""
Attribute matchers for mentor/mentee pairs.

Each matcher compares one attribute of a mentor with the corresponding
attribute of a mentee and returns a sub-score in [0, 1]. Matchers are
independent of weights; the aggregator applies those.

Matchers:
- Skills overlap: |mentor ∩ preferred| / max(1, |preferred|)
- Binary match: equality for scalars, non-empty intersection for lists
- Experience ordering: 1 if the mentor is strictly more senior
- Personality affinity: (3 - rank) / 3 from the compatibility table
"""

from typing import Iterable, Optional, Set, Union

from .compatibility import CompatibilityTable, DEFAULT_COMPATIBILITY_TABLE, MAX_RANKED_PAIRINGS


def _label_set(values: Optional[Iterable[str]]) -> Set[str]:
    """Deduplicated label set; missing values are treated as empty."""
    if not values:
        return set()
    if isinstance(values, str):
        values = [values]
    return {v for v in values if v}


def skills_overlap(
    mentor_skills: Optional[Iterable[str]],
    preferred_skills: Optional[Iterable[str]]
) -> float:
    """
    Share of the mentee's preferred skills the mentor offers.

    Both sides are deduplicated before counting. The denominator floor of 1
    makes an empty preference list score 0.
    """
    preferred = _label_set(preferred_skills)
    common = _label_set(mentor_skills) & preferred
    return len(common) / max(1, len(preferred))


def binary_match(
    mentor_value: Union[str, Iterable[str], None],
    mentee_value: Union[str, Iterable[str], None]
) -> float:
    """
    1.0 if the values match, else 0.0.

    Strings match on plain equality, so two empty locations match. Lists
    match on any shared label; an empty list never matches.
    """
    if isinstance(mentor_value, str) and isinstance(mentee_value, str):
        return 1.0 if mentor_value == mentee_value else 0.0
    return 1.0 if _label_set(mentor_value) & _label_set(mentee_value) else 0.0


def experience_match(
    mentor_experience: Optional[float],
    mentee_experience: Optional[float]
) -> float:
    """1.0 if the mentor's experience strictly exceeds the mentee's."""
    if mentor_experience is None or mentee_experience is None:
        return 0.0
    return 1.0 if mentor_experience > mentee_experience else 0.0


def personality_affinity(
    mentor_type: Optional[str],
    mentee_type: Optional[str],
    table: CompatibilityTable = DEFAULT_COMPATIBILITY_TABLE
) -> float:
    """
    Affinity of the mentor's type from the mentee's point of view.

    Rank 0 in the mentee's list gives 1.0, rank 1 gives 2/3, rank 2 gives
    1/3. Unlisted or unknown types give 0.0.
    """
    if not mentor_type or not mentee_type:
        return 0.0
    rank = table.rank_of(mentee_type, mentor_type)
    if rank is None:
        return 0.0
    return (MAX_RANKED_PAIRINGS - rank) / MAX_RANKED_PAIRINGS
