"""Create answer use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel

from study.application.usecase.base import BaseUseCase
from study.domain.model import Answer
from study.domain.service import AnswerService
from study.domain.value import QuestionId, UserId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str  # UUID string
    body: str
    author_id: str  # User ID from authenticated user
    author_email: str | None = None


class AnswerResponse(BaseModel):
    """Answer as returned by the API."""

    answer_id: str
    question_id: str
    body: str
    author_id: str
    author_email: str | None
    is_accepted: bool
    created_at: datetime

    @classmethod
    def from_answer(cls, answer: Answer) -> "AnswerResponse":
        return cls(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            body=answer.body,
            author_id=str(answer.author_id),
            author_email=answer.author_email,
            is_accepted=answer.is_accepted,
            created_at=answer.created_at,
        )


class CreateAnswerUseCase(BaseUseCase):
    """Use case for posting an answer to a question."""

    def __init__(self, answer_service: AnswerService) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
        """
        self.answer_service = answer_service

    async def execute(self, request: CreateAnswerRequest) -> AnswerResponse:
        """Execute create answer flow.

        Args:
            request: Create answer request

        Returns:
            Created answer

        Raises:
            NotFoundError: If the question does not exist
            ValueError: If the body is invalid
        """
        with logfire.span(
            "create_answer.execute",
            question_id=request.question_id,
            author_id=request.author_id,
        ):
            answer = await self.answer_service.create_answer(
                question_id=QuestionId(UUID(request.question_id)),
                author_id=UserId(UUID(request.author_id)),
                author_email=request.author_email,
                body=request.body,
            )
            return AnswerResponse.from_answer(answer)
