"""Repository interfaces for the Threadline domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from threadline.domain.repository.comment import CommentRepository
from threadline.domain.repository.unit_of_work import UnitOfWork

__all__ = [
    "CommentRepository",
    "UnitOfWork",
]
