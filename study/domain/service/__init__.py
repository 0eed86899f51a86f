"""Domain services."""

from .answer_service import AnswerService
from .base import Service
from .counter_service import CounterService
from .jwt_service import JWTService
from .question_service import QuestionService
from .vote_service import VoteService

__all__ = [
    "AnswerService",
    "CounterService",
    "JWTService",
    "QuestionService",
    "Service",
    "VoteService",
]
