"""Data loading module for mentor and mentee uploads."""

from .loaders import load_mentors, load_mentees, read_records_csv
from .validation import (
    RecordValidationError,
    validate_records_frame,
    REQUIRED_MENTOR_FIELDS,
    REQUIRED_MENTEE_FIELDS,
)

__all__ = [
    "load_mentors",
    "load_mentees",
    "read_records_csv",
    "RecordValidationError",
    "validate_records_frame",
    "REQUIRED_MENTOR_FIELDS",
    "REQUIRED_MENTEE_FIELDS",
]
