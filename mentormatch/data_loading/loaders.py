"""
Data loading functions for mentor and mentee uploads.

This module reads CSV tables, validates their shape and builds records.
Label-list cells hold comma-separated values, e.g. "Python, Go".
"""

import logging
from pathlib import Path
from typing import List, Union, IO

import pandas as pd

from ..records.schema import Mentor, Mentee, is_known_mbti
from .validation import (
    REQUIRED_MENTOR_FIELDS,
    REQUIRED_MENTEE_FIELDS,
    RecordValidationError,
    validate_records_frame,
)

logger = logging.getLogger(__name__)

CsvSource = Union[str, Path, IO]


def read_records_csv(source: CsvSource) -> pd.DataFrame:
    """
    Read an upload table with every cell kept as a string.

    Args:
        source: File path or file-like object (e.g. a browser upload)

    Returns:
        DataFrame with string cells; empty cells are ""

    Raises:
        FileNotFoundError: If a path is given and doesn't exist
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"CSV file not found: {source}")
        logger.info(f"Loading records from {source}")

    try:
        df = pd.read_csv(source, dtype=str, keep_default_na=False, skip_blank_lines=True)
    except pd.errors.EmptyDataError:
        return pd.DataFrame()

    df.columns = [str(c).strip() for c in df.columns]
    logger.info(f"Loaded {len(df)} rows with {len(df.columns)} columns")
    return df


def _optional(row: pd.Series, column: str) -> str:
    return row[column] if column in row.index else ""


def _warn_unknown_types(records, kind: str) -> None:
    unknown = sorted({r.mbti for r in records if r.mbti and not is_known_mbti(r.mbti)})
    if unknown:
        logger.warning(f"{kind} with unrecognized personality types (scored as no affinity): {unknown}")


def mentors_from_frame(df: pd.DataFrame) -> List[Mentor]:
    """
    Validate a mentor table and build records.

    Raises:
        RecordValidationError: If the table fails validation
    """
    issues = validate_records_frame(df, REQUIRED_MENTOR_FIELDS)
    if issues:
        raise RecordValidationError(issues)

    mentors = []
    for position, (_, row) in enumerate(df.iterrows(), start=1):
        try:
            mentors.append(Mentor(
                last_work_role=row["last_work_role"],
                skills=row["skills"],
                interests=row["interests"],
                industry_needs=row["industry_specific_needs"],
                location=_optional(row, "location"),
                mbti=_optional(row, "mbti"),
                experience_level=_optional(row, "experience_level"),
                max_match=row["max_match"],
            ))
        except ValueError as e:
            issues.append(f"Row {position}: {e}")

    if issues:
        raise RecordValidationError(issues)
    _warn_unknown_types(mentors, "Mentors")
    return mentors


def mentees_from_frame(df: pd.DataFrame) -> List[Mentee]:
    """
    Validate a mentee table and build records.

    Raises:
        RecordValidationError: If the table fails validation
    """
    issues = validate_records_frame(df, REQUIRED_MENTEE_FIELDS)
    if issues:
        raise RecordValidationError(issues)

    mentees = []
    for position, (_, row) in enumerate(df.iterrows(), start=1):
        try:
            mentees.append(Mentee(
                last_work_role=row["last_work_role"],
                career_goals=row["career_goals"],
                preferred_skills=row["preferred_skills"],
                interests=row["interests"],
                industry_needs=row["industry_specific_needs"],
                location=_optional(row, "location"),
                mbti=_optional(row, "mbti"),
                experience_level=_optional(row, "experience_level"),
            ))
        except ValueError as e:
            issues.append(f"Row {position}: {e}")

    if issues:
        raise RecordValidationError(issues)
    _warn_unknown_types(mentees, "Mentees")
    return mentees


def load_mentors(source: CsvSource) -> List[Mentor]:
    """Read, validate and build mentor records from a CSV upload."""
    mentors = mentors_from_frame(read_records_csv(source))
    logger.info(f"Parsed {len(mentors)} mentors")
    return mentors


def load_mentees(source: CsvSource) -> List[Mentee]:
    """Read, validate and build mentee records from a CSV upload."""
    mentees = mentees_from_frame(read_records_csv(source))
    logger.info(f"Parsed {len(mentees)} mentees")
    return mentees
