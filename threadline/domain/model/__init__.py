"""Domain model entities for Threadline."""

from threadline.domain.model.comment import Comment
from threadline.domain.model.page import (
    CascadeDeleteResult,
    CursorPage,
    CursorPageMeta,
    OffsetPage,
    OffsetPageMeta,
)

__all__ = [
    "Comment",
    "OffsetPage",
    "OffsetPageMeta",
    "CursorPage",
    "CursorPageMeta",
    "CascadeDeleteResult",
]
