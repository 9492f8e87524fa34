"""
Mentor Matching

This package ranks mentors for each mentee using a weighted combination of
attribute matchers (skills, interests, industry needs, location and
personality-type affinity).

Key Design Decisions:
- Scoring is a pure function of (mentor, mentee, weights, compatibility table)
- The compatibility table is an immutable value passed into scoring, not a global
- Records are frozen dataclasses built by the CSV ingestion layer
- Collections are replaced wholesale on every upload
"""

__version__ = "1.0.0"
