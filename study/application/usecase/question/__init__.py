"""Question use cases."""

from .create_question import CreateQuestionRequest, CreateQuestionUseCase
from .get_question import (
    GetQuestionRequest,
    GetQuestionUseCase,
    QuestionView,
    build_question_view,
)
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    QuestionListItem,
)

__all__ = [
    "CreateQuestionRequest",
    "CreateQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionUseCase",
    "QuestionView",
    "build_question_view",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "QuestionListItem",
]
