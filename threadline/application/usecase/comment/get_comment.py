"""Get comment use case."""

from pydantic import BaseModel

from threadline.application.usecase.base import BaseUseCase, parse_comment_id
from threadline.domain.error import NotFoundError
from threadline.domain.service import CommentService

from .item import CommentItem


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str  # UUID string


class GetCommentUseCase(BaseUseCase):
    """Use case for reading a single live comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> CommentItem:
        """Fetch the comment or raise NotFoundError."""
        comment = await self.comment_service.get_comment_by_id(
            parse_comment_id(request.comment_id)
        )
        if comment is None:
            raise NotFoundError("Comment", request.comment_id)
        return CommentItem.from_comment(comment)
