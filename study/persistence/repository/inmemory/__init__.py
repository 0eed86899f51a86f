"""In-memory repository implementations for testing."""

from .answer import InMemoryAnswerRepository
from .database import InMemoryDatabase, InMemoryUnitOfWork
from .question import InMemoryQuestionRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryQuestionRepository",
    "InMemoryAnswerRepository",
    "InMemoryVoteRepository",
    "InMemoryUnitOfWork",
]
