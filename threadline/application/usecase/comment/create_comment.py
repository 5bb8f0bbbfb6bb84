"""Create comment use case."""

from pydantic import BaseModel

from threadline.application.usecase.base import BaseUseCase, parse_comment_id
from threadline.domain.error import NotFoundError
from threadline.domain.service import CommentService

from .item import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    text: str
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentUseCase(BaseUseCase):
    """Use case for creating a top-level comment or a reply."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Steps:
        1. Verify the parent is a live comment when replying
        2. Create the comment and bump the parent's counter

        Args:
            request: Create comment request

        Returns:
            Created comment

        Raises:
            ValueError: If the parent ID is malformed
            NotFoundError: If the parent comment does not exist or is deleted
            ValidationError: If the text is blank
        """
        parent_id = parse_comment_id(request.parent_id) if request.parent_id else None

        if parent_id and not await self.comment_service.exists(parent_id):
            raise NotFoundError("Parent comment", request.parent_id)

        comment = await self.comment_service.create_comment(
            text=request.text, parent_id=parent_id
        )
        return CommentItem.from_comment(comment)
