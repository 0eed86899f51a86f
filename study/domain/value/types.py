"""Domain value objects for study Q&A.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from study.domain.value.common import RootValueObject, ValueObject


class Level(str, Enum):
    """Academic level a question is tagged with."""

    L100 = "100"
    L200 = "200"
    L300 = "300"
    L400 = "400"
    L500 = "500"


class QuestionCounter(str, Enum):
    """Denormalized counters stored on a question row."""

    UPVOTES = "upvotes_count"
    ANSWERS = "answers_count"


class CourseCode(RootValueObject[str]):
    """Course code a question is tagged with.

    Normalized to upper case with surrounding whitespace removed.
    Examples: 'CSC 201', 'MTH101', 'GST111'
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize(cls, v: str) -> str:
        """Trim and upper-case the code before validation."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("root")
    @classmethod
    def validate_course_code(cls, v: str) -> str:
        """Validate course code format."""
        if not re.match(r"^[A-Z0-9 ]{2,20}$", v):
            raise ValueError(
                "Course code must be 2-20 characters of letters, digits and spaces"
            )
        return v


class VoteState(ValueObject):
    """Result of a vote toggle."""

    voted: bool
    upvotes_count: int
