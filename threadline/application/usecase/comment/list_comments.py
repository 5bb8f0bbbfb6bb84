"""List comments use cases (offset and cursor pagination)."""

from pydantic import BaseModel

from threadline.application.usecase.base import BaseUseCase, parse_comment_id
from threadline.domain.service import PaginationService
from threadline.domain.value import CommentSort

from .item import CamelModel, CommentItem


class OffsetMeta(CamelModel):
    """Offset listing metadata."""

    page: int
    limit: int
    total: int


class CursorMeta(CamelModel):
    """Cursor listing metadata."""

    next_cursor: str | None
    has_more: bool
    limit: int
    sort: CommentSort | None


class ListCommentsRequest(BaseModel):
    """List comments by page number."""

    parent_id: str | None = None  # None lists top-level comments
    page: int = 1
    limit: int | None = None
    sort: str | None = None


class ListCommentsResponse(BaseModel):
    """One page of comments."""

    comments: list[CommentItem]
    meta: OffsetMeta


class ListCommentsByCursorRequest(BaseModel):
    """List comments after a cursor."""

    parent_id: str | None = None  # None lists top-level comments
    cursor: str | None = None  # Id of the last comment of the previous page
    limit: int | None = None
    sort: str | None = None


class ListCommentsByCursorResponse(BaseModel):
    """One cursor page of comments."""

    comments: list[CommentItem]
    meta: CursorMeta


class ListCommentsUseCase(BaseUseCase):
    """Use case for offset-paginated listing of top-level comments or replies."""

    def __init__(self, pagination_service: PaginationService) -> None:
        self.pagination_service = pagination_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """List one page.

        Raises:
            ValueError: If the parent ID is malformed
            ValidationError: If page or limit is out of range
        """
        parent_id = parse_comment_id(request.parent_id) if request.parent_id else None
        page = await self.pagination_service.list_page(
            parent_id=parent_id,
            page=request.page,
            limit=request.limit,
            sort=request.sort,
        )
        return ListCommentsResponse(
            comments=[CommentItem.from_comment(c) for c in page.items],
            meta=OffsetMeta(
                page=page.meta.page, limit=page.meta.limit, total=page.meta.total
            ),
        )


class ListCommentsByCursorUseCase(BaseUseCase):
    """Use case for cursor-paginated listing of top-level comments or replies."""

    def __init__(self, pagination_service: PaginationService) -> None:
        self.pagination_service = pagination_service

    async def execute(
        self, request: ListCommentsByCursorRequest
    ) -> ListCommentsByCursorResponse:
        """List the page following the request cursor.

        Raises:
            ValueError: If the parent ID or cursor is malformed
            ValidationError: If limit is out of range
        """
        parent_id = parse_comment_id(request.parent_id) if request.parent_id else None
        cursor = parse_comment_id(request.cursor) if request.cursor else None

        page = await self.pagination_service.list_after_cursor(
            parent_id=parent_id,
            cursor=cursor,
            limit=request.limit,
            sort=request.sort,
        )
        meta = page.meta
        return ListCommentsByCursorResponse(
            comments=[CommentItem.from_comment(c) for c in page.items],
            meta=CursorMeta(
                next_cursor=str(meta.next_cursor) if meta.next_cursor else None,
                has_more=meta.has_more,
                limit=meta.limit,
                sort=meta.sort,
            ),
        )
