"""
Record schema for mentors and mentees.

Defines the validated data structures produced by the CSV ingestion layer
and consumed by the scoring core. Records are immutable once built; the
store assigns identifiers by creating a copy with ``id`` set.

Column names follow the upload format:
- Mentor: last_work_role, skills, interests, industry_specific_needs,
  max_match, location, mbti, experience_level
- Mentee: last_work_role, career_goals, preferred_skills, interests,
  industry_specific_needs, location, mbti, experience_level
"""

import math
from dataclasses import dataclass
from typing import Optional, Dict, Any, Tuple, Iterable, Union

MBTI_TYPES: Tuple[str, ...] = (
    "ENFJ", "ENFP", "ENTJ", "ENTP",
    "ESFJ", "ESFP", "ESTJ", "ESTP",
    "INFJ", "INFP", "INTJ", "INTP",
    "ISFJ", "ISFP", "ISTJ", "ISTP",
)

LabelInput = Union[str, Iterable[str], None]


def normalize_labels(values: LabelInput) -> Tuple[str, ...]:
    """
    Coerce a label list into a tuple of stripped, non-empty strings.

    A single string is treated as a comma-separated list. Order and
    duplicates are kept; matchers deduplicate when comparing.
    """
    if values is None:
        return ()
    if isinstance(values, str):
        values = values.split(",")
    labels = []
    for value in values:
        if not isinstance(value, str):
            raise ValueError(f"Labels must be strings, got {type(value).__name__}")
        value = value.strip()
        if value:
            labels.append(value)
    return tuple(labels)


def normalize_mbti(value: Optional[str]) -> str:
    """Upper-case and strip a personality type code. Unknown codes are kept."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"mbti must be a string, got {type(value).__name__}")
    return value.strip().upper()


def is_known_mbti(code: str) -> bool:
    return code in MBTI_TYPES


def _coerce_experience(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError("experience_level must be a number, got bool")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"experience_level must be a number, got {value!r}")
    if not math.isfinite(number):
        raise ValueError(f"experience_level must be finite, got {value!r}")
    return number


def _coerce_capacity(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError("max_match must be an integer, got bool")
    if isinstance(value, int):
        number = value
    else:
        try:
            number = int(str(value).strip())
        except ValueError:
            raise ValueError(f"max_match must be an integer, got {value!r}")
    if number < 0:
        raise ValueError(f"max_match must be non-negative, got {number}")
    return number


def _coerce_text(name: str, value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string, got {type(value).__name__}")
    return value.strip()


def _optional_id(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"id must be an integer, got {value!r}")
    return value


@dataclass(frozen=True)
class Mentor:
    """
    A mentor record.

    Attributes:
        last_work_role: Most recent role, free text
        skills: Skill labels offered by the mentor
        interests: Interest labels
        industry_needs: Industry labels the mentor can cover
        location: Free-text location, matched exactly
        mbti: Personality type code (one of MBTI_TYPES when known)
        experience_level: Optional numeric seniority
        max_match: Optional maximum number of concurrent mentees
        id: Store-assigned identifier, None until persisted
    """
    last_work_role: str
    skills: Tuple[str, ...] = ()
    interests: Tuple[str, ...] = ()
    industry_needs: Tuple[str, ...] = ()
    location: str = ""
    mbti: str = ""
    experience_level: Optional[float] = None
    max_match: Optional[int] = None
    id: Optional[int] = None

    def __post_init__(self):
        """Validate and normalize fields."""
        object.__setattr__(self, "last_work_role", _coerce_text("last_work_role", self.last_work_role))
        object.__setattr__(self, "skills", normalize_labels(self.skills))
        object.__setattr__(self, "interests", normalize_labels(self.interests))
        object.__setattr__(self, "industry_needs", normalize_labels(self.industry_needs))
        object.__setattr__(self, "location", _coerce_text("location", self.location))
        object.__setattr__(self, "mbti", normalize_mbti(self.mbti))
        object.__setattr__(self, "experience_level", _coerce_experience(self.experience_level))
        object.__setattr__(self, "max_match", _coerce_capacity(self.max_match))
        object.__setattr__(self, "id", _optional_id(self.id))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary using upload column names."""
        return {
            "id": self.id,
            "last_work_role": self.last_work_role,
            "skills": list(self.skills),
            "interests": list(self.interests),
            "industry_specific_needs": list(self.industry_needs),
            "location": self.location,
            "mbti": self.mbti,
            "experience_level": self.experience_level,
            "max_match": self.max_match,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Mentor":
        """Create from dictionary. Unknown keys are ignored."""
        return cls(
            last_work_role=data.get("last_work_role", ""),
            skills=data.get("skills"),
            interests=data.get("interests"),
            industry_needs=data.get("industry_specific_needs", data.get("industry_needs")),
            location=data.get("location", ""),
            mbti=data.get("mbti", ""),
            experience_level=data.get("experience_level"),
            max_match=data.get("max_match"),
            id=data.get("id"),
        )


@dataclass(frozen=True)
class Mentee:
    """
    A mentee record.

    Attributes:
        last_work_role: Most recent role, free text
        career_goals: Career goal labels
        preferred_skills: Skills the mentee wants to learn
        interests: Interest labels
        industry_needs: Industry labels the mentee needs covered
        location: Free-text location, matched exactly
        mbti: Personality type code
        experience_level: Optional numeric seniority
        id: Store-assigned identifier, None until persisted
    """
    last_work_role: str
    career_goals: Tuple[str, ...] = ()
    preferred_skills: Tuple[str, ...] = ()
    interests: Tuple[str, ...] = ()
    industry_needs: Tuple[str, ...] = ()
    location: str = ""
    mbti: str = ""
    experience_level: Optional[float] = None
    id: Optional[int] = None

    def __post_init__(self):
        """Validate and normalize fields."""
        object.__setattr__(self, "last_work_role", _coerce_text("last_work_role", self.last_work_role))
        object.__setattr__(self, "career_goals", normalize_labels(self.career_goals))
        object.__setattr__(self, "preferred_skills", normalize_labels(self.preferred_skills))
        object.__setattr__(self, "interests", normalize_labels(self.interests))
        object.__setattr__(self, "industry_needs", normalize_labels(self.industry_needs))
        object.__setattr__(self, "location", _coerce_text("location", self.location))
        object.__setattr__(self, "mbti", normalize_mbti(self.mbti))
        object.__setattr__(self, "experience_level", _coerce_experience(self.experience_level))
        object.__setattr__(self, "id", _optional_id(self.id))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary using upload column names."""
        return {
            "id": self.id,
            "last_work_role": self.last_work_role,
            "career_goals": list(self.career_goals),
            "preferred_skills": list(self.preferred_skills),
            "interests": list(self.interests),
            "industry_specific_needs": list(self.industry_needs),
            "location": self.location,
            "mbti": self.mbti,
            "experience_level": self.experience_level,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Mentee":
        """Create from dictionary. Unknown keys are ignored."""
        return cls(
            last_work_role=data.get("last_work_role", ""),
            career_goals=data.get("career_goals"),
            preferred_skills=data.get("preferred_skills"),
            interests=data.get("interests"),
            industry_needs=data.get("industry_specific_needs", data.get("industry_needs")),
            location=data.get("location", ""),
            mbti=data.get("mbti", ""),
            experience_level=data.get("experience_level"),
            id=data.get("id"),
        )
