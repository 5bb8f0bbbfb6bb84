"""Comment repository implementations.

``PostgresCommentRepository`` backs the service; the in-memory variant in
``inmemory`` backs unit and API tests.
"""

from threadline.persistence.repository.comment import PostgresCommentRepository

__all__ = ["PostgresCommentRepository"]
