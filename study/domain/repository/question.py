"""Question repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from study.domain.model.question import Question
from study.domain.value import CourseCode, Level, QuestionCounter, QuestionId


class QuestionSortOrder(str, Enum):
    """Sort order for question listings."""

    NEWEST = "newest"  # created_at DESC
    UPVOTED = "upvoted"  # upvotes_count DESC, then newest
    ANSWERED = "answered"  # answers_count DESC, then newest
    UNANSWERED = "unanswered"  # answers_count ASC, then newest


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        course_code: Optional[CourseCode] = None,
        level: Optional[Level] = None,
        unsolved_only: bool = False,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Question]:
        """Find questions with filtering and pagination.

        Args:
            sort: Sort order
            course_code: Filter by course code (None for all)
            level: Filter by level (None for all)
            unsolved_only: Only return questions without an accepted answer
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of questions matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self,
        course_code: Optional[CourseCode] = None,
        level: Optional[Level] = None,
        unsolved_only: bool = False,
    ) -> int:
        """Count questions matching the given filters."""
        pass

    @abstractmethod
    async def create(self, question: Question) -> Question:
        """Insert a new question.

        Only the row is created here; counters and the solved flag are
        maintained through apply_delta and the acceptance transition.

        Args:
            question: The question to insert

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def apply_delta(
        self, question_id: QuestionId, counter: QuestionCounter, delta: int
    ) -> Optional[int]:
        """Atomically add a signed delta to a counter.

        The store applies the delta itself (no read-then-write), so
        concurrent callers never lose updates.

        Args:
            question_id: The question ID
            counter: Which counter to change
            delta: Signed amount to add

        Returns:
            The counter value after the update, or None if the question
            does not exist

        Raises:
            InvariantViolationError: If the counter would become negative
        """
        pass
