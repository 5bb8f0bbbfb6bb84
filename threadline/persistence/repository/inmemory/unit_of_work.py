"""In-memory unit of work for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from threadline.domain.repository import UnitOfWork

from .comment import InMemoryCommentStore


class InMemoryUnitOfWork(UnitOfWork):
    """Restores the store snapshot taken on entry if the scope fails."""

    def __init__(self, store: InMemoryCommentStore) -> None:
        self.store = store

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        snapshot = dict(self.store.comments)
        try:
            yield
        except BaseException:
            # Cancellation included
            self.store.comments = snapshot
            raise
