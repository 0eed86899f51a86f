"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from study.domain.model.answer import Answer
from study.domain.value import AnswerId, QuestionId


class AnswerRepository(ABC):
    """Repository for Answer entity.

    Defines the contract for answer persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question.

        Args:
            question_id: The question ID

        Returns:
            Answers with the accepted one first, then oldest first
        """
        pass

    @abstractmethod
    async def create(self, answer: Answer) -> Answer:
        """Insert a new answer.

        Args:
            answer: The answer to insert

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def accept(self, question_id: QuestionId, answer_id: AnswerId) -> int:
        """Run the acceptance transition for a question as one atomic unit.

        Within a single unit scoped to the question: every other answer of
        the question is set back to pending, the target answer is accepted
        and the question is marked solved. Concurrent transitions on the
        same question are serialized by the store.

        Args:
            question_id: The question ID
            answer_id: The answer to accept (must belong to the question)

        Returns:
            Number of accepted answers of the question after the transition

        Raises:
            NotFoundError: If the question or the answer is gone
            ConflictError: If the transition lost a race and was rolled back
        """
        pass

    @abstractmethod
    async def count_accepted(self, question_id: QuestionId) -> int:
        """Count accepted answers of a question."""
        pass
