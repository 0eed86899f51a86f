"""Counter projector domain service."""

import logfire

from study.domain.error import InvariantViolationError, NotFoundError
from study.domain.repository import QuestionRepository
from study.domain.value import QuestionCounter, QuestionId

from .base import Service

ALLOWED_DELTAS = (1, -1)


class CounterService(Service):
    """Maintains the denormalized counters on question rows.

    Sole writer of upvotes_count and answers_count. Every change is a
    signed delta applied atomically by the store.
    """

    def __init__(self, question_repository: QuestionRepository) -> None:
        """Initialize counter service.

        Args:
            question_repository: Question repository
        """
        self.question_repository = question_repository

    async def apply_delta(
        self, question_id: QuestionId, counter: QuestionCounter, delta: int
    ) -> int:
        """Apply +1 or -1 to a question counter.

        Args:
            question_id: Question ID
            counter: Counter to change
            delta: +1 or -1

        Returns:
            Counter value after the update

        Raises:
            ValueError: If delta is not +1 or -1
            NotFoundError: If the question does not exist
            InvariantViolationError: If the counter would become negative
        """
        if delta not in ALLOWED_DELTAS:
            raise ValueError(f"Counter delta must be +1 or -1, got {delta}")

        with logfire.span(
            "counter_service.apply_delta",
            question_id=str(question_id),
            counter=counter.value,
            delta=delta,
        ):
            try:
                value = await self.question_repository.apply_delta(
                    question_id, counter, delta
                )
            except InvariantViolationError as e:
                logfire.error(
                    "Counter invariant violated",
                    question_id=str(question_id),
                    counter=counter.value,
                    delta=delta,
                    error=str(e),
                )
                raise

            if value is None:
                logfire.warn(
                    "Counter update on non-existent question",
                    question_id=str(question_id),
                )
                raise NotFoundError("Question", str(question_id))

            logfire.info(
                "Counter updated",
                question_id=str(question_id),
                counter=counter.value,
                value=value,
            )
            return value
