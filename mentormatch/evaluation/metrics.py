"""
Summary metrics for a batch of mentor rankings.

A match report describes how well the current mentor pool covers the
mentees for a given weight configuration:
1. Distribution of each mentee's best score
2. Coverage: share of mentees whose best match scores above zero
3. Mentor demand: how often each mentor appears in a top-N list, and
   how often it is the first choice; first choices are compared with the
   mentor's max_match capacity
"""

import json
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Any, Optional, Sequence

import numpy as np

from ..records.schema import Mentor
from ..ranking.ranker import MatchResult

logger = logging.getLogger(__name__)


@dataclass
class ScoreDistributionStats:
    """Statistics about score distribution."""
    mean: float
    std: float
    min: float
    max: float
    quantiles: Dict[str, float]  # e.g., {"p10": 0.2, "p50": 0.5, "p90": 0.8}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mean": float(self.mean),
            "std": float(self.std),
            "min": float(self.min),
            "max": float(self.max),
            "quantiles": {k: float(v) for k, v in self.quantiles.items()}
        }


@dataclass
class MentorDemand:
    """How often one mentor was proposed, against capacity."""
    mentor_id: int
    appearances: int
    first_choice: int
    capacity: Optional[int] = None

    @property
    def over_capacity(self) -> bool:
        return self.capacity is not None and self.first_choice > self.capacity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mentor_id": self.mentor_id,
            "appearances": int(self.appearances),
            "first_choice": int(self.first_choice),
            "capacity": self.capacity,
            "over_capacity": self.over_capacity,
        }


@dataclass
class MatchReport:
    """
    Summary of one matching run.

    Describes the rankings produced for a weight configuration; it is not
    a measure of mentoring outcomes.
    """
    n_mentors: int
    n_mentees: int
    best_score_stats: ScoreDistributionStats
    coverage: float
    mentor_demand: List[MentorDemand] = field(default_factory=list)

    @property
    def over_capacity(self) -> List[MentorDemand]:
        return [d for d in self.mentor_demand if d.over_capacity]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "n_mentors": self.n_mentors,
            "n_mentees": self.n_mentees,
            "best_score_stats": self.best_score_stats.to_dict(),
            "coverage": float(self.coverage),
            "mentor_demand": [d.to_dict() for d in self.mentor_demand],
        }

    def save(self, filepath: str) -> None:
        """Save report to JSON file."""
        with open(filepath, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
        logger.info(f"Saved match report to {filepath}")

    def summary(self) -> str:
        """Generate text summary of the report."""
        lines = [
            "Match Report",
            "=" * 50,
            f"Mentors: {self.n_mentors}",
            f"Mentees: {self.n_mentees}",
            f"Coverage (best score > 0): {self.coverage:.2%}",
            "",
            "Best Score Distribution:",
            f"  Mean: {self.best_score_stats.mean:.4f}",
            f"  Std:  {self.best_score_stats.std:.4f}",
            f"  Min:  {self.best_score_stats.min:.4f}",
            f"  Max:  {self.best_score_stats.max:.4f}",
        ]

        for q_name, q_value in self.best_score_stats.quantiles.items():
            lines.append(f"  {q_name}: {q_value:.4f}")

        over = self.over_capacity
        if over:
            lines.extend(["", "Mentors chosen first beyond capacity:"])
            for demand in over:
                lines.append(
                    f"  Mentor {demand.mentor_id}: first choice for {demand.first_choice}, "
                    f"capacity {demand.capacity}"
                )

        return "\n".join(lines)


def compute_score_distribution_stats(
    scores: Sequence[float],
    quantiles: Sequence[float] = (0.1, 0.25, 0.5, 0.75, 0.9)
) -> ScoreDistributionStats:
    """
    Compute distribution statistics for scores.

    Args:
        scores: Match scores; an empty sequence gives all-zero statistics
        quantiles: Quantile values to compute (default: p10, p25, p50, p75, p90)

    Returns:
        ScoreDistributionStats instance
    """
    values = np.asarray(scores, dtype=float)
    if values.size == 0:
        return ScoreDistributionStats(
            mean=0.0, std=0.0, min=0.0, max=0.0,
            quantiles={f"p{int(q * 100)}": 0.0 for q in quantiles}
        )

    quantile_dict = {
        f"p{int(q * 100)}": float(np.percentile(values, q * 100))
        for q in quantiles
    }

    return ScoreDistributionStats(
        mean=float(np.mean(values)),
        std=float(np.std(values)),
        min=float(np.min(values)),
        max=float(np.max(values)),
        quantiles=quantile_dict
    )


def compute_mentor_demand(
    rankings: Dict[int, List[MatchResult]],
    mentors: Sequence[Mentor]
) -> List[MentorDemand]:
    """
    Count top-N appearances and first choices per mentor.

    Returns:
        One MentorDemand per mentor, in mentor order
    """
    appearances = Counter()
    first_choice = Counter()
    for results in rankings.values():
        for position, result in enumerate(results):
            appearances[result.mentor.id] += 1
            if position == 0:
                first_choice[result.mentor.id] += 1

    return [
        MentorDemand(
            mentor_id=mentor.id,
            appearances=appearances[mentor.id],
            first_choice=first_choice[mentor.id],
            capacity=mentor.max_match,
        )
        for mentor in mentors
    ]


def create_match_report(
    rankings: Dict[int, List[MatchResult]],
    mentors: Sequence[Mentor]
) -> MatchReport:
    """
    Create a complete match report.

    Args:
        rankings: Mentee id to ranked matches (as from MentorRanker.match_all)
        mentors: The mentor pool the rankings were drawn from

    Returns:
        MatchReport instance
    """
    best_scores = [results[0].score if results else 0.0 for results in rankings.values()]
    n_mentees = len(rankings)
    covered = sum(1 for s in best_scores if s > 0)

    report = MatchReport(
        n_mentors=len(mentors),
        n_mentees=n_mentees,
        best_score_stats=compute_score_distribution_stats(best_scores),
        coverage=covered / n_mentees if n_mentees else 0.0,
        mentor_demand=compute_mentor_demand(rankings, mentors),
    )

    if report.over_capacity:
        logger.warning(f"{len(report.over_capacity)} mentors are first choice beyond their capacity")
    return report
