"""List questions use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from study.application.usecase.base import BaseUseCase
from study.config import QASettings
from study.domain.repository import QuestionSortOrder
from study.domain.service import QuestionService, VoteService
from study.domain.value import CourseCode, Level, UserId


class QuestionListItem(BaseModel):
    """Question list item in response."""

    question_id: str
    title: str
    course_code: str | None
    level: Level | None
    tags: list[str]
    author_id: str
    author_email: str | None
    upvotes_count: int
    answers_count: int
    solved: bool
    created_at: datetime
    has_voted: bool


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    sort: QuestionSortOrder = QuestionSortOrder.NEWEST
    course_code: str | None = None
    level: Level | None = None
    unsolved_only: bool = False
    limit: int | None = Field(default=None, ge=1)  # None for the default page size
    offset: int = Field(default=0, ge=0)
    viewer_id: str | None = None  # Current user ID (if authenticated)


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionListItem]
    total: int
    limit: int
    offset: int


class ListQuestionsUseCase(BaseUseCase):
    """Use case for listing questions with filtering and pagination."""

    def __init__(
        self,
        question_service: QuestionService,
        vote_service: VoteService,
        qa_settings: QASettings,
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            vote_service: Vote ledger domain service
            qa_settings: Q&A settings (page sizes)
        """
        self.question_service = question_service
        self.vote_service = vote_service
        self.qa_settings = qa_settings

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: List questions request with filters and pagination

        Returns:
            Page of questions matching the filters

        Raises:
            ValueError: If the course code filter is malformed
        """
        limit = min(
            request.limit or self.qa_settings.default_page_size,
            self.qa_settings.max_page_size,
        )

        with logfire.span(
            "list_questions.execute",
            sort=request.sort.value,
            course_code=request.course_code,
            level=request.level.value if request.level else None,
            unsolved_only=request.unsolved_only,
            limit=limit,
            offset=request.offset,
        ):
            course_code = (
                CourseCode(request.course_code) if request.course_code else None
            )

            questions, total = await self.question_service.list_questions(
                sort=request.sort,
                course_code=course_code,
                level=request.level,
                unsolved_only=request.unsolved_only,
                limit=limit,
                offset=request.offset,
            )

            # One batch query for the viewer's votes (avoid N+1)
            voted = {}
            if request.viewer_id and questions:
                voted = await self.vote_service.get_votes_for_questions(
                    UserId(UUID(request.viewer_id)), [q.id for q in questions]
                )

            items = [
                QuestionListItem(
                    question_id=str(q.id),
                    title=q.title,
                    course_code=q.course_code.root if q.course_code else None,
                    level=q.level,
                    tags=q.tags,
                    author_id=str(q.author_id),
                    author_email=q.author_email,
                    upvotes_count=q.upvotes_count,
                    answers_count=q.answers_count,
                    solved=q.solved,
                    created_at=q.created_at,
                    has_voted=voted.get(q.id, False),
                )
                for q in questions
            ]

            logfire.info("Questions listed", count=len(items), total=total)

            return ListQuestionsResponse(
                questions=items,
                total=total,
                limit=limit,
                offset=request.offset,
            )
