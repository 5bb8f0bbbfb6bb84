"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comment import GetCommentRequest, GetCommentUseCase
from .item import CommentItem
from .list_comments import (
    CursorMeta,
    ListCommentsByCursorRequest,
    ListCommentsByCursorResponse,
    ListCommentsByCursorUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    OffsetMeta,
)
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentRequest",
    "GetCommentUseCase",
    "CursorMeta",
    "ListCommentsByCursorRequest",
    "ListCommentsByCursorResponse",
    "ListCommentsByCursorUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "OffsetMeta",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
