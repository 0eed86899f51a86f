"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from study.domain.model import Answer, Question, Vote
from study.domain.value import AnswerId, CourseCode, Level, QuestionId, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict

    Returns:
        Question domain model
    """
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        body=row["body"],
        course_code=CourseCode(row["course_code"]) if row.get("course_code") else None,
        level=Level(row["level"]) if row.get("level") else None,
        author_id=UserId(_uuid(row["author_id"])),
        author_email=row.get("author_email"),
        upvotes_count=row["upvotes_count"],
        answers_count=row["answers_count"],
        solved=row["solved"],
        created_at=row["created_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    Args:
        question: Question domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": question.id,
        "title": question.title,
        "body": question.body,
        "course_code": question.course_code.root if question.course_code else None,
        "level": question.level.value if question.level else None,
        "author_id": question.author_id,
        "author_email": question.author_email,
        "upvotes_count": question.upvotes_count,
        "answers_count": question.answers_count,
        "solved": question.solved,
        "created_at": question.created_at,
    }


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model.

    Args:
        row: Database row as dict

    Returns:
        Answer domain model
    """
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        body=row["body"],
        author_id=UserId(_uuid(row["author_id"])),
        author_email=row.get("author_email"),
        is_accepted=row["is_accepted"],
        created_at=row["created_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return answer.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        question_id=QuestionId(_uuid(row["question_id"])),
        voter_id=UserId(_uuid(row["voter_id"])),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return vote.model_dump()
