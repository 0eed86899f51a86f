"""Unit of work interface."""

from abc import ABC, abstractmethod
from typing import AsyncContextManager


class UnitOfWork(ABC):
    """Groups the writes of one domain operation.

    Writes made inside ``atomic()`` are undone together when the block
    raises, whatever the caller later does with the error. A block that
    completes leaves its writes to the enclosing transaction.
    """

    @abstractmethod
    def atomic(self) -> AsyncContextManager[None]:
        """Open an all-or-nothing block.

        Usage:
            async with unit_of_work.atomic():
                await vote_repository.delete(question_id, voter_id)
                await counter_service.apply_delta(question_id, counter, -1)
        """
        pass
