"""Match scoring: compatibility table, attribute matchers, weights and aggregation."""

from .compatibility import (
    CompatibilityTable,
    DEFAULT_COMPATIBILITY_TABLE,
    load_compatibility_table,
)
from .matchers import skills_overlap, binary_match, experience_match, personality_affinity
from .weights import MatchWeights, ScoringVariant, DEFAULT_WEIGHTS
from .aggregator import aggregate, explain_score, compute_sub_scores, ScoreBreakdown

__all__ = [
    "CompatibilityTable",
    "DEFAULT_COMPATIBILITY_TABLE",
    "load_compatibility_table",
    "skills_overlap",
    "binary_match",
    "experience_match",
    "personality_affinity",
    "MatchWeights",
    "ScoringVariant",
    "DEFAULT_WEIGHTS",
    "aggregate",
    "explain_score",
    "compute_sub_scores",
    "ScoreBreakdown",
]
