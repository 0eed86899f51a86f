"""Test configuration and helpers."""

from datetime import datetime, timedelta
from uuid import uuid4

from study.config import Settings
from study.domain.model import Answer, Question
from study.domain.service import JWTService
from study.domain.value import AnswerId, CourseCode, Level, QuestionId, UserId


def make_question(
    author_id: UserId | None = None,
    title: str = "How should I revise for the data structures exam?",
    body: str = "The past questions cover trees and heaps, what else comes up?",
    course_code: str | None = "CSC 201",
    level: Level | None = Level.L200,
    created_at: datetime | None = None,
    **fields,
) -> Question:
    """Build a question with sensible defaults for tests."""
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        body=body,
        course_code=CourseCode(course_code) if course_code else None,
        level=level,
        author_id=author_id or UserId(uuid4()),
        author_email="asker@student.example.edu",
        created_at=created_at or datetime.now(),
        **fields,
    )


def make_answer(
    question_id: QuestionId,
    author_id: UserId | None = None,
    body: str = "Work through every past question on balanced trees.",
    created_at: datetime | None = None,
    is_accepted: bool = False,
) -> Answer:
    """Build an answer with sensible defaults for tests."""
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question_id,
        body=body,
        author_id=author_id or UserId(uuid4()),
        author_email="helper@student.example.edu",
        is_accepted=is_accepted,
        created_at=created_at or datetime.now(),
    )


def minutes_ago(minutes: int) -> datetime:
    """Timestamp a number of minutes in the past."""
    return datetime.now() - timedelta(minutes=minutes)


def auth_cookies(user_id: UserId | str, email: str | None = None) -> dict[str, str]:
    """Cookies carrying an identity token signed with the configured secret."""
    token = JWTService(Settings().auth).create_token(str(user_id), email)
    return {"auth_token": token}
