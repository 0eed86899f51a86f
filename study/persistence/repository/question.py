"""PostgreSQL implementation of Question repository."""

from typing import List, Optional

import logfire
from sqlalchemy import Select, asc, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from study.domain.error import InvariantViolationError
from study.domain.model import Question
from study.domain.repository.question import QuestionRepository, QuestionSortOrder
from study.domain.value import CourseCode, Level, QuestionCounter, QuestionId
from study.persistence.mappers import question_to_dict, row_to_question
from study.persistence.tables import questions_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _filter(
        stmt: Select,
        course_code: Optional[CourseCode],
        level: Optional[Level],
        unsolved_only: bool,
    ) -> Select:
        if course_code is not None:
            stmt = stmt.where(questions_table.c.course_code == course_code.root)
        if level is not None:
            stmt = stmt.where(questions_table.c.level == level.value)
        if unsolved_only:
            stmt = stmt.where(questions_table.c.solved.is_(False))
        return stmt

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        with logfire.span(
            "question_repository.find_by_id", question_id=str(question_id)
        ):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Question not found", question_id=str(question_id))
                return None

            return row_to_question(row._asdict())

    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        course_code: Optional[CourseCode] = None,
        level: Optional[Level] = None,
        unsolved_only: bool = False,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering and pagination."""
        with logfire.span(
            "question_repository.find_all",
            sort=sort.value,
            course_code=course_code.root if course_code else None,
            level=level.value if level else None,
            unsolved_only=unsolved_only,
            limit=limit,
            offset=offset,
        ):
            stmt = self._filter(
                select(questions_table), course_code, level, unsolved_only
            )

            # Sort order (newest first breaks ties)
            if sort == QuestionSortOrder.UPVOTED:
                stmt = stmt.order_by(desc(questions_table.c.upvotes_count))
            elif sort == QuestionSortOrder.ANSWERED:
                stmt = stmt.order_by(desc(questions_table.c.answers_count))
            elif sort == QuestionSortOrder.UNANSWERED:
                stmt = stmt.order_by(asc(questions_table.c.answers_count))
            stmt = stmt.order_by(desc(questions_table.c.created_at))

            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            questions = [row_to_question(row._asdict()) for row in result.fetchall()]

            logfire.info("Found questions", count=len(questions))
            return questions

    async def count(
        self,
        course_code: Optional[CourseCode] = None,
        level: Optional[Level] = None,
        unsolved_only: bool = False,
    ) -> int:
        """Count questions matching the given filters."""
        stmt = self._filter(
            select(func.count()).select_from(questions_table),
            course_code,
            level,
            unsolved_only,
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def create(self, question: Question) -> Question:
        """Insert a new question."""
        with logfire.span(
            "question_repository.create", question_id=str(question.id)
        ):
            stmt = insert(questions_table).values(**question_to_dict(question))
            await self.session.execute(stmt)
            await self.session.flush()
            logfire.info("Question inserted", question_id=str(question.id))
            return question

    async def apply_delta(
        self, question_id: QuestionId, counter: QuestionCounter, delta: int
    ) -> Optional[int]:
        """Atomically add a signed delta to a counter.

        The guard in the WHERE clause keeps the counter non-negative; the
        CHECK constraint on the table backs it up.
        """
        with logfire.span(
            "question_repository.apply_delta",
            question_id=str(question_id),
            counter=counter.value,
            delta=delta,
        ):
            column = questions_table.c[counter.value]
            stmt = (
                update(questions_table)
                .where(questions_table.c.id == question_id)
                .where(column + delta >= 0)
                .values({counter.value: column + delta})
                .returning(column)
            )
            result = await self.session.execute(stmt)
            value = result.scalar_one_or_none()
            if value is not None:
                return value

            # No row updated: either the question is gone or the guard refused
            exists = await self.session.execute(
                select(questions_table.c.id).where(questions_table.c.id == question_id)
            )
            if exists.first() is None:
                return None

            raise InvariantViolationError(
                f"{counter.value} of question {question_id} would become negative"
            )
