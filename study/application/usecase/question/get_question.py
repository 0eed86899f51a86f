"""Get question use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from study.domain.model import Question
from study.domain.service import QuestionService, VoteService
from study.domain.value import Level, QuestionId, UserId


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str  # UUID string
    viewer_id: str | None = None  # Current user ID (if authenticated)


class QuestionView(BaseModel):
    """Read model of a question as shown to one viewer."""

    question_id: str
    title: str
    body: str
    course_code: str | None
    level: Level | None
    tags: list[str]
    author_id: str
    author_email: str | None
    upvotes_count: int
    answers_count: int
    solved: bool
    created_at: datetime
    my_vote_state: bool | None  # None for anonymous viewers

    @classmethod
    def from_question(
        cls, question: Question, my_vote_state: bool | None
    ) -> "QuestionView":
        """Build the view from a question and the viewer's ledger state."""
        return cls(
            question_id=str(question.id),
            title=question.title,
            body=question.body,
            course_code=question.course_code.root if question.course_code else None,
            level=question.level,
            tags=question.tags,
            author_id=str(question.author_id),
            author_email=question.author_email,
            upvotes_count=question.upvotes_count,
            answers_count=question.answers_count,
            solved=question.solved,
            created_at=question.created_at,
            my_vote_state=my_vote_state,
        )


async def build_question_view(
    question: Question, vote_service: VoteService, viewer_id: str | None
) -> QuestionView:
    """Build a question view, reading the viewer's vote from the ledger."""
    my_vote_state = None
    if viewer_id:
        my_vote_state = await vote_service.has_voted(
            question.id, UserId(UUID(viewer_id))
        )
    return QuestionView.from_question(question, my_vote_state)


class GetQuestionUseCase:
    """Use case for retrieving a question by ID."""

    def __init__(
        self, question_service: QuestionService, vote_service: VoteService
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            vote_service: Vote ledger domain service
        """
        self.question_service = question_service
        self.vote_service = vote_service

    async def execute(self, request: GetQuestionRequest) -> Optional[QuestionView]:
        """Execute get question flow.

        Args:
            request: Get question request with question ID and optional viewer

        Returns:
            Question view if found, None otherwise
        """
        with logfire.span(
            "get_question.execute",
            question_id=request.question_id,
            viewer_id=request.viewer_id,
        ):
            question = await self.question_service.get_question_by_id(
                QuestionId(UUID(request.question_id))
            )
            if not question:
                return None

            return await build_question_view(
                question, self.vote_service, request.viewer_id
            )
