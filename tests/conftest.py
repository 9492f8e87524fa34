"""
Pytest configuration and shared fixtures for the matching tests.
"""
import os
import sys

import pytest

# Add the project root to the path so the package imports without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from mentormatch.records import Mentor, Mentee
from mentormatch.scoring import MatchWeights

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))


@pytest.fixture
def project_root():
    return PROJECT_ROOT


@pytest.fixture
def mentee_intj():
    """Mentee looking for Go/Rust help in NYC fintech"""
    return Mentee(
        last_work_role="Backend Engineer",
        career_goals=["Tech Lead"],
        preferred_skills=["Go", "Rust"],
        interests=[],
        industry_needs=["fintech"],
        location="NYC",
        mbti="INTJ",
        id=1,
    )


@pytest.fixture
def mentor_a():
    """Strong match: shares one skill, location, industry; top MBTI pairing"""
    return Mentor(
        last_work_role="Staff Engineer",
        skills=["Go", "Python"],
        industry_needs=["fintech"],
        location="NYC",
        mbti="ENTP",
        max_match=2,
        id=1,
    )


@pytest.fixture
def mentor_b():
    """Weak match: nothing in common"""
    return Mentor(
        last_work_role="Java Developer",
        skills=["Java"],
        industry_needs=[],
        location="LA",
        mbti="ISFP",
        max_match=1,
        id=2,
    )


@pytest.fixture
def example_weights():
    return MatchWeights({"skills": 0.5, "location": 0.2, "industryNeeds": 0.2, "mbti": 0.1})


@pytest.fixture
def mentors_csv(tmp_path):
    path = tmp_path / "mentors.csv"
    path.write_text(
        "last_work_role,skills,interests,industry_specific_needs,max_match,location,mbti\n"
        'Staff Engineer,"Go, Python",chess,fintech,2,NYC,ENTP\n'
        'Designer,"Figma, UX Research","travel, art",education,1,Remote,infp\n'
    )
    return str(path)


@pytest.fixture
def mentees_csv(tmp_path):
    path = tmp_path / "mentees.csv"
    path.write_text(
        "last_work_role,career_goals,preferred_skills,interests,industry_specific_needs,location,mbti\n"
        'Backend Engineer,Tech Lead,"Go, Rust",chess,fintech,NYC,INTJ\n'
        'Junior Designer,Design Lead,Figma,art,education,Remote,ENFP\n'
    )
    return str(path)
