"""Repository interfaces for the study Q&A domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from study.domain.repository.answer import AnswerRepository
from study.domain.repository.question import QuestionRepository, QuestionSortOrder
from study.domain.repository.unit_of_work import UnitOfWork
from study.domain.repository.vote import VoteRepository

__all__ = [
    "QuestionRepository",
    "QuestionSortOrder",
    "AnswerRepository",
    "VoteRepository",
    "UnitOfWork",
]
