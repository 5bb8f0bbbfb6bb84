"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from threadline.domain.value import CommentId


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_comment_id(value: str) -> CommentId:
    """Parse a comment ID string.

    Raises:
        ValueError: If the value is not a valid UUID
    """
    return CommentId(UUID(value))
