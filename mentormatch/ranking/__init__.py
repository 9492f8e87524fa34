"""Ranking module for top-N mentor selection."""

from .ranker import MentorRanker, MatchResult, rank_mentors, score_to_percentage, DEFAULT_TOP_N

__all__ = ["MentorRanker", "MatchResult", "rank_mentors", "score_to_percentage", "DEFAULT_TOP_N"]
