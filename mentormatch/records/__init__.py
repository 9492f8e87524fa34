"""Mentor and mentee record types."""

from .schema import Mentor, Mentee, MBTI_TYPES, normalize_labels, is_known_mbti

__all__ = ["Mentor", "Mentee", "MBTI_TYPES", "normalize_labels", "is_known_mbti"]
