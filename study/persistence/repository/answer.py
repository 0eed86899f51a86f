"""PostgreSQL implementation of Answer repository."""

from typing import List, Optional

import logfire
from sqlalchemy import and_, desc, func, insert, select, update
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from study.domain.error import ConflictError, NotFoundError
from study.domain.model import Answer
from study.domain.repository import AnswerRepository
from study.domain.value import AnswerId, QuestionId
from study.persistence.mappers import answer_to_dict, row_to_answer
from study.persistence.tables import answers_table, questions_table

# serialization_failure, deadlock_detected
RETRYABLE_SQLSTATES = frozenset({"40001", "40P01"})


def _sqlstate(error: DBAPIError) -> Optional[str]:
    return getattr(error.orig, "sqlstate", None) or getattr(error.orig, "pgcode", None)


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question, accepted first."""
        with logfire.span(
            "answer_repository.find_by_question", question_id=str(question_id)
        ):
            stmt = (
                select(answers_table)
                .where(answers_table.c.question_id == question_id)
                .order_by(
                    desc(answers_table.c.is_accepted),
                    answers_table.c.created_at,
                )
            )
            result = await self.session.execute(stmt)
            return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def create(self, answer: Answer) -> Answer:
        """Insert a new answer."""
        with logfire.span("answer_repository.create", answer_id=str(answer.id)):
            stmt = insert(answers_table).values(**answer_to_dict(answer))
            await self.session.execute(stmt)
            await self.session.flush()
            return answer

    async def accept(self, question_id: QuestionId, answer_id: AnswerId) -> int:
        """Run the acceptance transition inside a savepoint.

        The question row is locked first, so transitions on the same
        question queue up behind each other.
        """
        with logfire.span(
            "answer_repository.accept",
            question_id=str(question_id),
            answer_id=str(answer_id),
        ):
            try:
                async with self.session.begin_nested():
                    locked = await self.session.execute(
                        select(questions_table.c.id)
                        .where(questions_table.c.id == question_id)
                        .with_for_update()
                    )
                    if locked.first() is None:
                        raise NotFoundError("Question", str(question_id))

                    await self.session.execute(
                        update(answers_table)
                        .where(
                            and_(
                                answers_table.c.question_id == question_id,
                                answers_table.c.id != answer_id,
                                answers_table.c.is_accepted.is_(True),
                            )
                        )
                        .values(is_accepted=False)
                    )

                    result = await self.session.execute(
                        update(answers_table)
                        .where(
                            and_(
                                answers_table.c.id == answer_id,
                                answers_table.c.question_id == question_id,
                            )
                        )
                        .values(is_accepted=True)
                    )
                    if result.rowcount == 0:
                        raise NotFoundError("Answer", str(answer_id))

                    await self.session.execute(
                        update(questions_table)
                        .where(questions_table.c.id == question_id)
                        .values(solved=True)
                    )
            except IntegrityError as e:
                logfire.warn(
                    "Acceptance lost race on unique accepted answer",
                    question_id=str(question_id),
                    error=str(e),
                )
                raise ConflictError(
                    f"Concurrent acceptance on question {question_id}"
                ) from e
            except DBAPIError as e:
                if _sqlstate(e) not in RETRYABLE_SQLSTATES:
                    raise
                logfire.warn(
                    "Acceptance transition serialization failure",
                    question_id=str(question_id),
                    sqlstate=_sqlstate(e),
                )
                raise ConflictError(
                    f"Concurrent acceptance on question {question_id}"
                ) from e

            return await self.count_accepted(question_id)

    async def count_accepted(self, question_id: QuestionId) -> int:
        """Count accepted answers of a question."""
        stmt = (
            select(func.count())
            .select_from(answers_table)
            .where(
                answers_table.c.question_id == question_id,
                answers_table.c.is_accepted.is_(True),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
