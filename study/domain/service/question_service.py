"""Question domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from study.domain.model.question import Question
from study.domain.repository import QuestionRepository, QuestionSortOrder
from study.domain.value import CourseCode, Level, QuestionId, UserId

from .base import Service


class QuestionService(Service):
    """Domain service for question lifecycle operations."""

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def create_question(
        self,
        author_id: UserId,
        author_email: str | None,
        title: str,
        body: str,
        course_code: str | None = None,
        level: Level | None = None,
    ) -> Question:
        """Ask a new question.

        Counters start at zero and the question starts open.

        Args:
            author_id: Author user ID
            author_email: Author email (denormalized for display)
            title: Question title
            body: Question details
            course_code: Optional course code tag (normalized to upper case)
            level: Optional level tag

        Returns:
            Created question

        Raises:
            ValueError: If title, body or course code are invalid
        """
        with logfire.span(
            "question_service.create_question",
            author_id=str(author_id),
            course_code=course_code,
            level=level.value if level else None,
        ):
            code = course_code.strip() if course_code else ""

            question = Question(
                id=QuestionId(uuid4()),
                title=title.strip(),
                body=body.strip(),
                course_code=CourseCode(code) if code else None,
                level=level,
                author_id=author_id,
                author_email=author_email,
                upvotes_count=0,
                answers_count=0,
                solved=False,
                created_at=datetime.now(),
            )

            saved = await self.question_repository.create(question)
            logfire.info(
                "Question created",
                question_id=str(saved.id),
                author_id=str(author_id),
            )
            return saved

    async def get_question_by_id(self, question_id: QuestionId) -> Question | None:
        """Get a question by ID.

        Args:
            question_id: Question ID

        Returns:
            Question if found, None otherwise
        """
        with logfire.span(
            "question_service.get_question_by_id", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)

            if question:
                logfire.info("Question found", question_id=str(question_id))
            else:
                logfire.warn("Question not found", question_id=str(question_id))

            return question

    async def list_questions(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        course_code: CourseCode | None = None,
        level: Level | None = None,
        unsolved_only: bool = False,
        limit: int = 30,
        offset: int = 0,
    ) -> tuple[list[Question], int]:
        """List questions with filters.

        Returns:
            Tuple of (page of questions, total matching questions)
        """
        with logfire.span(
            "question_service.list_questions",
            sort=sort.value,
            course_code=course_code.root if course_code else None,
            level=level.value if level else None,
            unsolved_only=unsolved_only,
        ):
            total = await self.question_repository.count(
                course_code=course_code, level=level, unsolved_only=unsolved_only
            )
            questions = await self.question_repository.find_all(
                sort=sort,
                course_code=course_code,
                level=level,
                unsolved_only=unsolved_only,
                limit=limit,
                offset=offset,
            )
            logfire.info("Questions listed", count=len(questions), total=total)
            return questions, total
