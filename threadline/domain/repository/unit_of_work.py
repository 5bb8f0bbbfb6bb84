"""Unit of work interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class UnitOfWork(ABC):
    """Scope in which several repository writes commit together or not at all.

    Usage:
        async with unit_of_work.atomic():
            await repository.mark_deleted(ids, at)
            await repository.adjust_sub_comment_count(parent_id, -1)
    """

    @abstractmethod
    def atomic(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic scope.

        Writes made inside the scope are rolled back if it exits with an
        exception (cancellation included).
        """
        pass
