"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from study.domain.model.vote import Vote
from study.domain.value import QuestionId, UserId


class VoteRepository(ABC):
    """Repository for Vote ledger rows.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find(self, question_id: QuestionId, voter_id: UserId) -> Optional[Vote]:
        """Find a voter's vote on a question.

        Args:
            question_id: The question ID
            voter_id: The voter's user ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_voter_and_questions(
        self, voter_id: UserId, question_ids: Sequence[QuestionId]
    ) -> List[Vote]:
        """Find a voter's votes on multiple questions (batch query).

        Args:
            voter_id: The voter's user ID
            question_ids: Question IDs to check

        Returns:
            List of votes by the voter on the given questions
        """
        pass

    @abstractmethod
    async def create(self, vote: Vote) -> Vote:
        """Insert a vote.

        Args:
            vote: The vote to insert

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the voter already voted on the question
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId, voter_id: UserId) -> bool:
        """Delete a voter's vote on a question.

        Args:
            question_id: The question ID
            voter_id: The voter's user ID

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass

    @abstractmethod
    async def count_by_question(self, question_id: QuestionId) -> int:
        """Count votes on a question."""
        pass
