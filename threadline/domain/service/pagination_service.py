"""Paginated comment listings."""

import logfire

from threadline.config import CommentSettings
from threadline.domain.error import ValidationError
from threadline.domain.model import (
    CursorPage,
    CursorPageMeta,
    OffsetPage,
    OffsetPageMeta,
)
from threadline.domain.repository import CommentRepository
from threadline.domain.value import (
    CommentId,
    CommentSort,
    CursorPosition,
    SortSpec,
    parse_sort,
    resolve_sort,
)

from .base import Service, span_id


class PaginationService(Service):
    """Offset and cursor listings of the children of one parent.

    Both modes list live comments whose parent is the given id, or the
    top-level comments when the parent is None.
    """

    def __init__(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> None:
        """Initialize pagination service.

        Args:
            comment_repository: Comment repository
            settings: Comment settings (page size bounds)
        """
        self.comment_repository = comment_repository
        self.settings = settings

    def _check_limit(self, limit: int) -> None:
        if not 1 <= limit <= self.settings.max_page_size:
            raise ValidationError(
                f"limit must be between 1 and {self.settings.max_page_size}"
            )

    async def list_page(
        self,
        parent_id: CommentId | None,
        page: int = 1,
        limit: int | None = None,
        sort: CommentSort | str | None = None,
    ) -> OffsetPage:
        """List one page by page number.

        Concurrent writes can shift items between pages; this is not
        corrected. A page past the end is empty.

        Args:
            parent_id: Parent filter, None for top-level comments
            page: 1-based page number
            limit: Page size (defaults to the configured page size)
            sort: Sort selector, unknown selectors use most-recent-first

        Returns:
            Page items and {page, limit, total} metadata

        Raises:
            ValidationError: If page < 1 or limit is out of range
        """
        limit = limit if limit is not None else self.settings.default_page_size
        if page < 1:
            raise ValidationError("page must be at least 1")
        self._check_limit(limit)

        sort_spec = resolve_sort(sort)
        with logfire.span(
            "pagination_service.list_page",
            parent_id=span_id(parent_id),
            page=page,
            limit=limit,
            sort=sort_spec.field.value,
            descending=sort_spec.descending,
        ):
            items = await self.comment_repository.find_page(
                parent_id=parent_id,
                sort=sort_spec,
                limit=limit,
                offset=(page - 1) * limit,
            )
            total = await self.comment_repository.count(parent_id)
            logfire.info("Comment page listed", count=len(items), total=total)
            return OffsetPage(
                items=items,
                meta=OffsetPageMeta(page=page, limit=limit, total=total),
            )

    async def list_after_cursor(
        self,
        parent_id: CommentId | None,
        cursor: CommentId | None = None,
        limit: int | None = None,
        sort: CommentSort | str | None = None,
    ) -> CursorPage:
        """List the page that follows ``cursor``.

        The cursor is the id of the last comment of the previous page. Its
        value for the sort field is looked up (deleted comments included) so
        the next page starts right after it in the requested order. One
        extra row is fetched to tell whether more results follow.

        Args:
            parent_id: Parent filter, None for top-level comments
            cursor: Id of the last comment already seen, None for the first page
            limit: Page size (defaults to the configured page size)
            sort: Sort selector, unknown selectors use most-recent-first

        Returns:
            Page items and {next_cursor, has_more, limit, sort} metadata

        Raises:
            ValidationError: If limit is out of range
        """
        limit = limit if limit is not None else self.settings.default_page_size
        self._check_limit(limit)

        selector = parse_sort(sort)
        sort_spec = resolve_sort(selector)
        with logfire.span(
            "pagination_service.list_after_cursor",
            parent_id=span_id(parent_id),
            cursor=span_id(cursor),
            limit=limit,
            sort=sort_spec.field.value,
            descending=sort_spec.descending,
        ):
            position = await self._resolve_cursor(cursor, sort_spec)
            items = await self.comment_repository.find_after_cursor(
                parent_id=parent_id,
                sort=sort_spec,
                limit=limit + 1,
                cursor=position,
            )

            has_more = len(items) > limit
            if has_more:
                items = items[:limit]

            next_cursor = items[-1].id if len(items) == limit else None
            logfire.info(
                "Comment cursor page listed", count=len(items), has_more=has_more
            )
            return CursorPage(
                items=items,
                meta=CursorPageMeta(
                    next_cursor=next_cursor,
                    has_more=has_more,
                    limit=limit,
                    sort=selector,
                ),
            )

    async def _resolve_cursor(
        self, cursor: CommentId | None, sort_spec: SortSpec
    ) -> CursorPosition | None:
        if cursor is None:
            return None
        if sort_spec.is_id_order:
            return CursorPosition(id=cursor)

        comment = await self.comment_repository.find_by_id_including_deleted(cursor)
        if comment is None:
            logfire.warn(
                "Cursor comment not found, bounding by id only", cursor=str(cursor)
            )
            return CursorPosition(id=cursor)
        return CursorPosition.from_comment(comment, sort_spec)
