"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository, InMemoryCommentStore
from .unit_of_work import InMemoryUnitOfWork

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryCommentStore",
    "InMemoryUnitOfWork",
]
