"""Evaluation module for summarizing matching runs."""

from .metrics import (
    compute_score_distribution_stats,
    compute_mentor_demand,
    MatchReport,
    create_match_report
)

__all__ = [
    "compute_score_distribution_stats",
    "compute_mentor_demand",
    "MatchReport",
    "create_match_report"
]
