"""Update comment use case."""

from pydantic import BaseModel

from threadline.application.usecase.base import BaseUseCase, parse_comment_id
from threadline.domain.error import NotFoundError
from threadline.domain.service import CommentService

from .item import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    text: str  # New text content (required, cannot be blank)


class UpdateCommentUseCase(BaseUseCase):
    """Use case for updating a comment's text content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Deleted comments are never brought back by an update.

        Args:
            request: Update comment request with comment ID and new text

        Returns:
            Updated comment details

        Raises:
            ValueError: If the comment ID is malformed
            NotFoundError: If the comment does not exist or is deleted
            ValidationError: If the text is blank
        """
        updated = await self.comment_service.update_text(
            parse_comment_id(request.comment_id), request.text
        )
        if updated is None:
            raise NotFoundError("Comment", request.comment_id)
        return CommentItem.from_comment(updated)
