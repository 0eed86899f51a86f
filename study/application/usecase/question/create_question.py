"""Create question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from study.application.usecase.base import BaseUseCase
from study.domain.service import QuestionService
from study.domain.value import Level, UserId

from .get_question import QuestionView


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str
    body: str
    course_code: str | None = None
    level: Level | None = None
    author_id: str  # User ID from authenticated user
    author_email: str | None = None


class CreateQuestionUseCase(BaseUseCase):
    """Use case for asking a new question."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: CreateQuestionRequest) -> QuestionView:
        """Execute create question flow.

        Args:
            request: Create question request

        Returns:
            View of the created question

        Raises:
            ValueError: If title, body or course code are invalid
        """
        with logfire.span("create_question.execute", author_id=request.author_id):
            question = await self.question_service.create_question(
                author_id=UserId(UUID(request.author_id)),
                author_email=request.author_email,
                title=request.title,
                body=request.body,
                course_code=request.course_code,
                level=request.level,
            )

            # A new question has no votes yet
            return QuestionView.from_question(question, my_vote_state=False)
