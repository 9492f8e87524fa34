"""
Test cases for CSV upload loading and validation
"""
import io

import pandas as pd
import pytest

from mentormatch.data_loading import (
    load_mentors,
    load_mentees,
    read_records_csv,
    validate_records_frame,
    RecordValidationError,
    REQUIRED_MENTOR_FIELDS,
)

MENTOR_HEADER = "last_work_role,skills,interests,industry_specific_needs,max_match\n"


class TestLoadMentors:
    """Test cases for load_mentors"""

    def test_parses_rows(self, mentors_csv):
        mentors = load_mentors(mentors_csv)
        assert len(mentors) == 2
        assert mentors[0].skills == ("Go", "Python")
        assert mentors[0].max_match == 2
        assert mentors[1].interests == ("travel", "art")
        assert mentors[1].mbti == "INFP"
        assert all(m.id is None for m in mentors)

    def test_file_like_source(self):
        upload = io.StringIO(MENTOR_HEADER + "Lead,Go,chess,fintech,1\n")
        mentors = load_mentors(upload)
        assert mentors[0].last_work_role == "Lead"
        assert mentors[0].location == ""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_mentors(str(tmp_path / "missing.csv"))

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("")
        with pytest.raises(RecordValidationError) as exc_info:
            load_mentors(str(path))
        assert exc_info.value.issues == ["The CSV file appears to be empty"]

    def test_header_only(self):
        with pytest.raises(RecordValidationError, match="empty"):
            load_mentors(io.StringIO(MENTOR_HEADER))

    def test_missing_columns(self):
        upload = io.StringIO("last_work_role,skills\nLead,Go\n")
        with pytest.raises(RecordValidationError) as exc_info:
            load_mentors(upload)
        assert exc_info.value.issues == [
            "Missing required fields: interests, industry_specific_needs, max_match"
        ]

    def test_row_issues_collected(self):
        upload = io.StringIO(
            MENTOR_HEADER
            + "Lead,Go,chess,fintech,two\n"
            + ",Go,chess,fintech,1\n"
            + "Lead,\" , \",chess,fintech,1\n"
        )
        with pytest.raises(RecordValidationError) as exc_info:
            load_mentors(upload)
        issues = exc_info.value.issues
        assert "Row 1 has an invalid max_match value. Must be a number." in issues
        assert "Row 2 has an empty last_work_role" in issues
        assert "Row 3 has an invalid skills list. Must be comma-separated values." in issues

    def test_negative_capacity_reported_per_row(self):
        upload = io.StringIO(MENTOR_HEADER + "Lead,Go,chess,fintech,-1\n")
        with pytest.raises(RecordValidationError) as exc_info:
            load_mentors(upload)
        assert exc_info.value.issues[0].startswith("Row 1:")

    def test_invalid_experience_level(self):
        upload = io.StringIO(
            MENTOR_HEADER.strip() + ",experience_level\n" + "Lead,Go,chess,fintech,1,lots\n"
        )
        with pytest.raises(RecordValidationError, match="experience_level"):
            load_mentors(upload)

    def test_validation_error_is_value_error(self):
        assert issubclass(RecordValidationError, ValueError)


class TestLoadMentees:
    """Test cases for load_mentees"""

    def test_parses_rows(self, mentees_csv):
        mentees = load_mentees(mentees_csv)
        assert len(mentees) == 2
        assert mentees[0].preferred_skills == ("Go", "Rust")
        assert mentees[0].industry_needs == ("fintech",)
        assert mentees[1].career_goals == ("Design Lead",)

    def test_mentor_table_rejected(self, mentors_csv):
        with pytest.raises(RecordValidationError, match="Missing required fields"):
            load_mentees(mentors_csv)

    def test_sample_data(self, project_root):
        mentees = load_mentees(f"{project_root}/data/sample_mentees.csv")
        mentors = load_mentors(f"{project_root}/data/sample_mentors.csv")
        assert mentees and mentors


class TestReadRecordsCsv:
    """Test cases for read_records_csv"""

    def test_cells_are_strings(self, mentors_csv):
        df = read_records_csv(mentors_csv)
        assert df["max_match"].tolist() == ["2", "1"]

    def test_header_whitespace_stripped(self):
        df = read_records_csv(io.StringIO(" last_work_role , skills \nLead,Go\n"))
        assert list(df.columns) == ["last_work_role", "skills"]


class TestValidateRecordsFrame:
    """Test cases for validate_records_frame"""

    def test_valid_frame(self):
        df = pd.DataFrame([{
            "last_work_role": "Lead",
            "skills": "Go",
            "interests": "chess",
            "industry_specific_needs": "fintech",
            "max_match": "1",
        }])
        assert validate_records_frame(df, REQUIRED_MENTOR_FIELDS) == []

    def test_empty_frame(self):
        assert validate_records_frame(pd.DataFrame(), REQUIRED_MENTOR_FIELDS) == [
            "The CSV file appears to be empty"
        ]
