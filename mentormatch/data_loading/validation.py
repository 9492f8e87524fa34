"""
Shape checks for uploaded mentor/mentee tables.

Checks run on the raw string table before any record is built:
- The table has at least one row
- Every required column is present
- Required cells are non-empty
- Integer and numeric columns parse
- Label-list columns contain at least one comma-separated value
"""

from typing import List, Sequence

import pandas as pd

REQUIRED_MENTOR_FIELDS = ["last_work_role", "skills", "interests", "industry_specific_needs", "max_match"]
REQUIRED_MENTEE_FIELDS = ["last_work_role", "career_goals", "preferred_skills", "interests", "industry_specific_needs"]

LIST_FIELDS = ["skills", "interests", "industry_specific_needs", "career_goals", "preferred_skills"]
INTEGER_FIELDS = ["max_match"]
NUMERIC_FIELDS = ["experience_level"]


class RecordValidationError(ValueError):
    """Raised when an uploaded table fails validation."""

    def __init__(self, issues: List[str]):
        self.issues = issues
        super().__init__("; ".join(issues))


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, float) and pd.isna(value)) or str(value).strip() == ""


def _parses_as_int(value: str) -> bool:
    try:
        int(str(value).strip())
    except ValueError:
        return False
    return True


def _parses_as_number(value: str) -> bool:
    try:
        float(str(value).strip())
    except ValueError:
        return False
    return True


def validate_records_frame(df: pd.DataFrame, required_fields: Sequence[str]) -> List[str]:
    """
    Validate an uploaded table against the required columns.

    Args:
        df: Raw table with string cells
        required_fields: Columns that must be present and non-empty

    Returns:
        List of issues (empty if valid). Row numbers are 1-based data rows.
    """
    if df is None or df.empty:
        return ["The CSV file appears to be empty"]

    missing = [f for f in required_fields if f not in df.columns]
    if missing:
        return [f"Missing required fields: {', '.join(missing)}"]

    issues = []
    for position, (_, row) in enumerate(df.iterrows(), start=1):
        for field in required_fields:
            value = row[field]
            if _is_blank(value):
                issues.append(f"Row {position} has an empty {field}")
                continue

            if field in INTEGER_FIELDS and not _parses_as_int(value):
                issues.append(f"Row {position} has an invalid {field} value. Must be a number.")

            if field in LIST_FIELDS and all(v.strip() == "" for v in str(value).split(",")):
                issues.append(f"Row {position} has an invalid {field} list. Must be comma-separated values.")

        for field in NUMERIC_FIELDS:
            if field in df.columns and not _is_blank(row[field]) and not _parses_as_number(row[field]):
                issues.append(f"Row {position} has an invalid {field} value. Must be a number.")

    return issues
