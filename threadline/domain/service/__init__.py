"""Domain services."""

from threadline.domain.service.base import Service
from threadline.domain.service.cascade_delete_service import CascadeDeleteService
from threadline.domain.service.comment_service import CommentService
from threadline.domain.service.counter_service import CounterService
from threadline.domain.service.pagination_service import PaginationService

__all__ = [
    "Service",
    "CascadeDeleteService",
    "CommentService",
    "CounterService",
    "PaginationService",
]
