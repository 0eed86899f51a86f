"""Domain value objects for study Q&A."""

from study.domain.value.identifiers import AnswerId, QuestionId, UserId
from study.domain.value.types import CourseCode, Level, QuestionCounter, VoteState

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    # Types
    "CourseCode",
    "Level",
    "QuestionCounter",
    "VoteState",
]
