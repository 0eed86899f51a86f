"""Shared in-memory store backing the in-memory repositories."""

from contextlib import asynccontextmanager
from contextvars import ContextVar
from typing import AsyncIterator, Callable, Optional

from study.domain.model import Answer, Question, Vote
from study.domain.repository import UnitOfWork
from study.domain.value import AnswerId, QuestionId, UserId

Undo = Callable[[], None]

# Undo log of the innermost open atomic block in the current task
_journal: ContextVar[Optional[list[Undo]]] = ContextVar(
    "inmemory_journal", default=None
)


class InMemoryDatabase:
    """Tables of the in-memory store.

    One instance is shared by all repositories of a container, so rows
    written in one request are visible in the next.
    """

    def __init__(self) -> None:
        self.questions: dict[QuestionId, Question] = {}
        self.answers: dict[AnswerId, Answer] = {}
        self.votes: dict[tuple[QuestionId, UserId], Vote] = {}

    def record(self, undo: Undo) -> None:
        """Register how to revert a write made inside an atomic block.

        Undo steps are inverse operations rather than snapshots, so
        reverting one task's block leaves interleaved writes of other
        tasks intact.
        """
        journal = _journal.get()
        if journal is not None:
            journal.append(undo)


class InMemoryUnitOfWork(UnitOfWork):
    """Unit of work over the in-memory store."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        parent = _journal.get()
        journal: list[Undo] = []
        token = _journal.set(journal)
        try:
            yield
        except Exception:
            for undo in reversed(journal):
                undo()
            raise
        else:
            # Nested block: the outer block may still revert these writes
            if parent is not None:
                parent.extend(journal)
        finally:
            _journal.reset(token)
