"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional, Sequence

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from study.domain.model import Vote
from study.domain.repository import VoteRepository
from study.domain.value import QuestionId, UserId
from study.persistence.mappers import row_to_vote, vote_to_dict
from study.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(self, question_id: QuestionId, voter_id: UserId) -> Optional[Vote]:
        """Find a voter's vote on a question."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.question_id == question_id,
                votes_table.c.voter_id == voter_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_voter_and_questions(
        self, voter_id: UserId, question_ids: Sequence[QuestionId]
    ) -> List[Vote]:
        """Find a voter's votes on multiple questions (batch query)."""
        if not question_ids:
            return []

        stmt = select(votes_table).where(
            and_(
                votes_table.c.voter_id == voter_id,
                votes_table.c.question_id.in_(list(question_ids)),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def create(self, vote: Vote) -> Vote:
        """Insert a vote (IntegrityError on the composite key if duplicate)."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def delete(self, question_id: QuestionId, voter_id: UserId) -> bool:
        """Delete a voter's vote on a question."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.question_id == question_id,
                votes_table.c.voter_id == voter_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count votes on a question."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.question_id == question_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
