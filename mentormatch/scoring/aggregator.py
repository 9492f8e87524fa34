"""
Weighted aggregation of attribute sub-scores.

Aggregate Formula:
    score = Σ sub_score(a) * weight(a) / Σ weight(a)

over the attributes of the active scoring variant. A zero weight sum
yields 0.0. Since every sub-score lies in [0, 1] and weights are
non-negative, the score is a weighted average and also lies in [0, 1].
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, Any

from ..records.schema import Mentor, Mentee
from .compatibility import CompatibilityTable, DEFAULT_COMPATIBILITY_TABLE
from .matchers import skills_overlap, binary_match, experience_match, personality_affinity
from .weights import (
    MatchWeights,
    ScoringVariant,
    SKILLS,
    LOCATION,
    INTERESTS,
    EXPERIENCE,
    INDUSTRY_NEEDS,
    MBTI,
)

logger = logging.getLogger(__name__)


@dataclass
class ScoreBreakdown:
    """
    Per-attribute detail behind an aggregate score.

    Attributes:
        sub_scores: Matcher output per attribute, each in [0, 1]
        contributions: sub_score * weight per attribute
        weight_total: Denominator used for normalization
        score: Final aggregate score in [0, 1]
    """
    sub_scores: Dict[str, float]
    contributions: Dict[str, float]
    weight_total: float
    score: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "sub_scores": dict(self.sub_scores),
            "contributions": dict(self.contributions),
            "weight_total": self.weight_total,
            "score": self.score,
        }


def compute_sub_scores(
    mentor: Mentor,
    mentee: Mentee,
    variant: ScoringVariant = ScoringVariant.INTERESTS,
    table: CompatibilityTable = DEFAULT_COMPATIBILITY_TABLE
) -> Dict[str, float]:
    """
    Run every matcher of the variant for one pair.

    Returns:
        Dictionary of attribute name to sub-score
    """
    sub_scores = {
        SKILLS: skills_overlap(mentor.skills, mentee.preferred_skills),
        INDUSTRY_NEEDS: binary_match(mentor.industry_needs, mentee.industry_needs),
        MBTI: personality_affinity(mentor.mbti, mentee.mbti, table),
        LOCATION: binary_match(mentor.location, mentee.location),
    }
    if variant is ScoringVariant.EXPERIENCE:
        sub_scores[EXPERIENCE] = experience_match(mentor.experience_level, mentee.experience_level)
    else:
        sub_scores[INTERESTS] = binary_match(mentor.interests, mentee.interests)
    return sub_scores


def explain_score(
    mentor: Mentor,
    mentee: Mentee,
    weights: MatchWeights,
    table: CompatibilityTable = DEFAULT_COMPATIBILITY_TABLE,
    variant: ScoringVariant = ScoringVariant.INTERESTS
) -> ScoreBreakdown:
    """
    Compute the aggregate score together with its breakdown.

    Negative and non-finite weights are treated as 0 so the result stays
    in [0, 1].
    """
    sub_scores = compute_sub_scores(mentor, mentee, variant, table)
    contributions = {
        attribute: sub_scores[attribute] * weights.effective(attribute)
        for attribute in variant.attributes
    }
    weight_total = weights.total(variant.attributes)

    if weight_total <= 0:
        score = 0.0
    else:
        score = min(1.0, math.fsum(contributions.values()) / weight_total)

    return ScoreBreakdown(
        sub_scores=sub_scores,
        contributions=contributions,
        weight_total=weight_total,
        score=score,
    )


def aggregate(
    mentor: Mentor,
    mentee: Mentee,
    weights: MatchWeights,
    table: CompatibilityTable = DEFAULT_COMPATIBILITY_TABLE,
    variant: ScoringVariant = ScoringVariant.INTERESTS
) -> float:
    """
    Compatibility score of mentor for mentee in [0, 1].

    Args:
        mentor: Candidate mentor
        mentee: Mentee being matched
        weights: Per-attribute weights
        table: Personality-type compatibility table
        variant: Attribute set to score

    Returns:
        Weighted average of the sub-scores, 0.0 when all weights are zero
    """
    score = explain_score(mentor, mentee, weights, table, variant).score
    logger.debug(f"Scored mentor {mentor.id} for mentee {mentee.id}: {score:.4f}")
    return score
