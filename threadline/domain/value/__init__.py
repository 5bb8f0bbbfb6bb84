"""Domain value objects for Threadline."""

from threadline.domain.value.identifiers import CommentId, new_comment_id
from threadline.domain.value.sort import (
    DEFAULT_SORT,
    SORT_POLICY,
    CommentSort,
    CursorPosition,
    SortField,
    SortSpec,
    parse_sort,
    resolve_sort,
)

__all__ = [
    # Identifiers
    "CommentId",
    "new_comment_id",
    # Sorting
    "CommentSort",
    "CursorPosition",
    "SortField",
    "SortSpec",
    "DEFAULT_SORT",
    "SORT_POLICY",
    "parse_sort",
    "resolve_sort",
]
