"""In-memory vote repository for testing."""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from study.domain.model.vote import Vote
from study.domain.repository.vote import VoteRepository
from study.domain.value import QuestionId, UserId

from .database import InMemoryDatabase


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def find(self, question_id: QuestionId, voter_id: UserId) -> Optional[Vote]:
        """Find a voter's vote on a question."""
        return self._db.votes.get((question_id, voter_id))

    async def find_by_voter_and_questions(
        self, voter_id: UserId, question_ids: Sequence[QuestionId]
    ) -> list[Vote]:
        """Find a voter's votes on multiple questions (batch query)."""
        if not question_ids:
            return []

        wanted = set(question_ids)
        return [
            v
            for v in self._db.votes.values()
            if v.voter_id == voter_id and v.question_id in wanted
        ]

    async def create(self, vote: Vote) -> Vote:
        """Insert a vote.

        Raises:
            IntegrityError: If the voter already voted on the question
        """
        key = (vote.question_id, vote.voter_id)
        if key in self._db.votes:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._db.votes[key] = vote
        self._db.record(lambda: self._db.votes.pop(key, None))
        return vote

    async def delete(self, question_id: QuestionId, voter_id: UserId) -> bool:
        """Delete a voter's vote on a question."""
        key = (question_id, voter_id)
        removed = self._db.votes.pop(key, None)
        if removed is None:
            return False

        self._db.record(lambda: self._db.votes.setdefault(key, removed))
        return True

    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count votes on a question."""
        return sum(1 for v in self._db.votes.values() if v.question_id == question_id)
