"""Paginated listing results."""

from typing import Optional

from threadline.domain.model.comment import Comment
from threadline.domain.model.common import DomainModel
from threadline.domain.value import CommentId, CommentSort


class OffsetPageMeta(DomainModel):
    """Metadata of an offset (page number) listing."""

    page: int
    limit: int
    total: int


class OffsetPage(DomainModel):
    """One page of an offset listing."""

    items: list[Comment]
    meta: OffsetPageMeta


class CursorPageMeta(DomainModel):
    """Metadata of a cursor listing.

    next_cursor is the id of the last returned comment when the page is
    full, None otherwise. A full last page still carries a cursor, whose
    follow-up page is empty.
    """

    next_cursor: Optional[CommentId] = None
    has_more: bool
    limit: int
    sort: Optional[CommentSort] = None


class CursorPage(DomainModel):
    """One page of a cursor listing."""

    items: list[Comment]
    meta: CursorPageMeta


class CascadeDeleteResult(DomainModel):
    """Outcome of a cascade delete.

    root is the snapshot taken before the subtree was marked deleted.
    deleted_count includes the root itself.
    """

    root: Comment
    deleted_count: int
