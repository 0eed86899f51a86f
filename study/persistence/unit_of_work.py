"""PostgreSQL unit of work backed by savepoints."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from study.domain.repository import UnitOfWork


class PostgresUnitOfWork(UnitOfWork):
    """Runs each atomic block in a SAVEPOINT of the request session.

    The savepoint is rolled back before the error leaves the block, so the
    request-level commit never sees a half-applied operation.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        try:
            async with self.session.begin_nested():
                yield
        except Exception as e:
            logfire.warn(
                "Atomic block rolled back",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise
