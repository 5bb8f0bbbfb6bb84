"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel, Field

from threadline.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    CursorMeta,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    ListCommentsByCursorRequest,
    ListCommentsByCursorUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    OffsetMeta,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from threadline.config import CommentSettings
from threadline.domain.error import (
    CascadeTimeoutError,
    NotFoundError,
    ValidationError,
)
from threadline.interface.api.response import (
    ErrorResponse,
    PaginatedResponse,
    SuccessResponse,
)

router = APIRouter(
    prefix="/api/v1/comments",
    tags=["comments"],
    route_class=DishkaRoute,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


class CommentTextAPIRequest(BaseModel):
    """API request body carrying comment text."""

    text: str = Field(min_length=1, max_length=10000)


def _bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def _not_found(error: NotFoundError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND, detail=f"{error.resource} not found"
    )


@router.get(
    "/cursor",
    response_model=PaginatedResponse[CommentItem, CursorMeta],
)
async def list_comments_by_cursor(
    use_case: FromDishka[ListCommentsByCursorUseCase],
    comment_settings: FromDishka[CommentSettings],
    parent_id: str | None = Query(default=None, alias="parentId"),
    cursor: str | None = Query(default=None),
    limit: int | None = Query(default=None, ge=1),
    sort: str | None = Query(default=None),
) -> PaginatedResponse[CommentItem, CursorMeta]:
    """List top-level comments or replies after a cursor.

    The cursor is the ``nextCursor`` of the previous page. Unknown sort
    selectors fall back to most-recent-first.
    """
    if limit is not None:
        limit = min(comment_settings.max_page_size, limit)

    try:
        result = await use_case.execute(
            ListCommentsByCursorRequest(
                parent_id=parent_id, cursor=cursor, limit=limit, sort=sort
            )
        )
    except (ValueError, ValidationError) as e:
        logfire.warn("Cursor listing rejected", error=str(e))
        raise _bad_request("Invalid parent ID or cursor")

    return PaginatedResponse(
        message="Comments fetched successfully",
        data=result.comments,
        meta=result.meta,
    )


@router.get("", response_model=PaginatedResponse[CommentItem, OffsetMeta])
async def list_comments(
    use_case: FromDishka[ListCommentsUseCase],
    comment_settings: FromDishka[CommentSettings],
    parent_id: str | None = Query(default=None, alias="parentId"),
    page: int = Query(default=1),
    limit: int | None = Query(default=None, ge=1),
    sort: str | None = Query(default=None),
) -> PaginatedResponse[CommentItem, OffsetMeta]:
    """List top-level comments (no parentId) or the replies of a comment."""
    page = max(1, page)
    if limit is not None:
        limit = min(comment_settings.max_page_size, limit)

    try:
        result = await use_case.execute(
            ListCommentsRequest(parent_id=parent_id, page=page, limit=limit, sort=sort)
        )
    except (ValueError, ValidationError) as e:
        logfire.warn("Listing rejected", error=str(e))
        raise _bad_request("Invalid parent ID")

    return PaginatedResponse(
        message="Comments fetched successfully",
        data=result.comments,
        meta=result.meta,
    )


@router.get(
    "/{comment_id}",
    response_model=SuccessResponse[CommentItem],
    responses=NOT_FOUND,
)
async def get_comment(
    comment_id: str,
    use_case: FromDishka[GetCommentUseCase],
) -> SuccessResponse[CommentItem]:
    """Get a comment by ID."""
    try:
        comment = await use_case.execute(GetCommentRequest(comment_id=comment_id))
    except NotFoundError as e:
        raise _not_found(e)
    except ValueError:
        raise _bad_request("Invalid comment ID")

    return SuccessResponse(message="Comment fetched successfully", data=comment)


@router.post(
    "",
    response_model=SuccessResponse[CommentItem],
    status_code=status.HTTP_201_CREATED,
    responses=NOT_FOUND,
)
async def create_comment(
    request: CommentTextAPIRequest,
    use_case: FromDishka[CreateCommentUseCase],
    parent_id: str | None = Query(default=None, alias="parentId"),
) -> SuccessResponse[CommentItem]:
    """Create a top-level comment, or a reply when parentId is given."""
    try:
        comment = await use_case.execute(
            CreateCommentRequest(text=request.text, parent_id=parent_id)
        )
    except NotFoundError as e:
        logfire.warn("Comment creation failed - parent not found", error=str(e))
        raise _not_found(e)
    except ValidationError as e:
        raise _bad_request(str(e))
    except ValueError:
        raise _bad_request("Invalid parent ID")

    return SuccessResponse(message="Comment created successfully", data=comment)


@router.put(
    "/{comment_id}",
    response_model=SuccessResponse[CommentItem],
    responses=NOT_FOUND,
)
async def update_comment(
    comment_id: str,
    request: CommentTextAPIRequest,
    use_case: FromDishka[UpdateCommentUseCase],
) -> SuccessResponse[CommentItem]:
    """Replace the text of a comment."""
    try:
        comment = await use_case.execute(
            UpdateCommentRequest(comment_id=comment_id, text=request.text)
        )
    except NotFoundError as e:
        logfire.warn("Attempt to edit missing or deleted comment", error=str(e))
        raise _not_found(e)
    except ValidationError as e:
        raise _bad_request(str(e))
    except ValueError:
        raise _bad_request("Invalid comment ID")

    return SuccessResponse(message="Comment updated successfully", data=comment)


@router.delete(
    "/{comment_id}",
    response_model=SuccessResponse[DeleteCommentResponse],
    responses={
        **NOT_FOUND,
        status.HTTP_504_GATEWAY_TIMEOUT: {"model": ErrorResponse},
    },
)
async def delete_comment(
    comment_id: str,
    use_case: FromDishka[DeleteCommentUseCase],
) -> SuccessResponse[DeleteCommentResponse]:
    """Delete a comment and all of its replies."""
    try:
        result = await use_case.execute(DeleteCommentRequest(comment_id=comment_id))
    except NotFoundError as e:
        raise _not_found(e)
    except CascadeTimeoutError as e:
        raise HTTPException(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail=str(e)
        )
    except ValueError:
        raise _bad_request("Invalid comment ID")

    return SuccessResponse(message="Comment deleted successfully", data=result)
