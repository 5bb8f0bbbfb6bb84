"""Delete comment use case."""

from pydantic import BaseModel

from threadline.application.usecase.base import BaseUseCase, parse_comment_id
from threadline.domain.error import NotFoundError
from threadline.domain.service import CascadeDeleteService

from .item import CamelModel, CommentItem


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string


class DeleteCommentResponse(CamelModel):
    """Delete comment response.

    comment is the state of the deleted root just before deletion.
    """

    comment: CommentItem
    deleted_count: int


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment and all of its replies."""

    def __init__(self, cascade_delete_service: CascadeDeleteService) -> None:
        """Initialize delete comment use case.

        Args:
            cascade_delete_service: Cascade delete domain service
        """
        self.cascade_delete_service = cascade_delete_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            ValueError: If the comment ID is malformed
            NotFoundError: If the comment does not exist or is already deleted
            CascadeTimeoutError: If the subtree could not be deleted in time
        """
        result = await self.cascade_delete_service.delete(
            parse_comment_id(request.comment_id)
        )
        if result is None:
            raise NotFoundError("Comment", request.comment_id)

        return DeleteCommentResponse(
            comment=CommentItem.from_comment(result.root),
            deleted_count=result.deleted_count,
        )
