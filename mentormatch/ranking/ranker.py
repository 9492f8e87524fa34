"""
Ranking of mentor candidates per mentee.

The ranker scores every candidate with the aggregator, sorts by score
descending and keeps the first ``top_n``. Python's sort is stable, so
candidates with equal scores keep their input order.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, Any, List, Optional, Sequence

from ..records.schema import Mentor, Mentee
from ..scoring.aggregator import ScoreBreakdown, explain_score
from ..scoring.compatibility import (
    CompatibilityTable,
    DEFAULT_COMPATIBILITY_TABLE,
    load_compatibility_table,
)
from ..scoring.weights import MatchWeights, ScoringVariant, variant_from_config

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 3


def score_to_percentage(score: float) -> int:
    """Render a score in [0, 1] as a whole percentage, rounding half up."""
    return int(math.floor(score * 100 + 0.5))


@dataclass(frozen=True)
class MatchResult:
    """
    One ranked mentor for a mentee.

    Attributes:
        mentor: The candidate mentor
        score: Aggregate score in [0, 1]
        breakdown: Optional per-attribute detail
    """
    mentor: Mentor
    score: float
    breakdown: Optional[ScoreBreakdown] = None

    @property
    def percentage(self) -> int:
        return score_to_percentage(self.score)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {
            "mentor_id": self.mentor.id,
            "score": self.score,
            "percentage": self.percentage,
        }
        if self.breakdown:
            result["breakdown"] = self.breakdown.to_dict()
        return result


def rank_mentors(
    mentee: Mentee,
    candidates: Sequence[Mentor],
    weights: MatchWeights,
    top_n: Optional[int] = DEFAULT_TOP_N,
    table: CompatibilityTable = DEFAULT_COMPATIBILITY_TABLE,
    variant: ScoringVariant = ScoringVariant.INTERESTS,
    return_breakdown: bool = False
) -> List[MatchResult]:
    """
    Rank mentors for one mentee.

    Args:
        mentee: Mentee being matched
        candidates: Mentor candidates; not modified
        weights: Per-attribute weights
        top_n: Number of results to keep, None for all
        table: Personality-type compatibility table
        variant: Attribute set to score
        return_breakdown: Whether to attach per-attribute detail

    Returns:
        MatchResult list sorted by score descending, ties in input order

    Raises:
        ValueError: If top_n is negative
    """
    if top_n is not None and top_n < 0:
        raise ValueError(f"top_n must be non-negative, got {top_n}")

    results = []
    for mentor in candidates:
        breakdown = explain_score(mentor, mentee, weights, table, variant)
        results.append(MatchResult(
            mentor=mentor,
            score=breakdown.score,
            breakdown=breakdown if return_breakdown else None,
        ))

    ranked = sorted(results, key=lambda r: r.score, reverse=True)
    if top_n is not None:
        ranked = ranked[:top_n]
    return ranked


class MentorRanker:
    """
    Ranker bound to a compatibility table, scoring variant and top-N.

    Attributes:
        table: Personality-type compatibility table
        variant: Attribute set to score
        top_n: Number of results kept per mentee (None for all)
    """

    def __init__(
        self,
        table: CompatibilityTable = DEFAULT_COMPATIBILITY_TABLE,
        variant: ScoringVariant = ScoringVariant.INTERESTS,
        top_n: Optional[int] = DEFAULT_TOP_N
    ):
        if top_n is not None and top_n < 0:
            raise ValueError(f"top_n must be non-negative, got {top_n}")
        self.table = table
        self.variant = variant
        self.top_n = top_n
        logger.info(f"Initialized MentorRanker with variant={variant.value}, top_n={top_n}")

    def rank(
        self,
        mentee: Mentee,
        candidates: Sequence[Mentor],
        weights: MatchWeights,
        return_breakdown: bool = False
    ) -> List[MatchResult]:
        """Rank candidates for one mentee."""
        return rank_mentors(
            mentee,
            candidates,
            weights,
            top_n=self.top_n,
            table=self.table,
            variant=self.variant,
            return_breakdown=return_breakdown,
        )

    def match_all(
        self,
        mentees: Sequence[Mentee],
        mentors: Sequence[Mentor],
        weights: MatchWeights,
        return_breakdown: bool = False
    ) -> Dict[int, List[MatchResult]]:
        """
        Rank mentors for every mentee.

        Mentees without a store-assigned id are keyed by their position.

        Returns:
            Dictionary of mentee id to ranked matches, in mentee order
        """
        logger.info(f"Ranking {len(mentors)} mentors for {len(mentees)} mentees")
        rankings = {}
        for index, mentee in enumerate(mentees):
            key = mentee.id if mentee.id is not None else index
            rankings[key] = self.rank(mentee, mentors, weights, return_breakdown)
        return rankings

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "MentorRanker":
        """
        Create from main config dictionary.

        Reads scoring.variant, scoring.compatibility_table (optional YAML
        path) and ranking.top_n.
        """
        scoring = config.get("scoring", {})
        table_path = scoring.get("compatibility_table")
        table = load_compatibility_table(table_path) if table_path else DEFAULT_COMPATIBILITY_TABLE
        top_n = config.get("ranking", {}).get("top_n", DEFAULT_TOP_N)
        return cls(table=table, variant=variant_from_config(config), top_n=top_n)
