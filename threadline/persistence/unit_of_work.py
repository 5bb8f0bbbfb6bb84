"""SQLAlchemy unit of work."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from threadline.domain.repository import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """Unit of work backed by a SAVEPOINT on the request session.

    The request-scoped session still owns the outer transaction and commits
    it at the end of the request; the savepoint makes the writes inside
    ``atomic()`` all-or-nothing within it.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
