"""PostgreSQL repository implementations."""

from study.persistence.repository.answer import PostgresAnswerRepository
from study.persistence.repository.question import PostgresQuestionRepository
from study.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresQuestionRepository",
    "PostgresAnswerRepository",
    "PostgresVoteRepository",
]
