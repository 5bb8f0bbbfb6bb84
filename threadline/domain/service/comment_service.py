"""Comment domain service."""

import logfire

from threadline.domain.error import ValidationError
from threadline.domain.model.comment import Comment
from threadline.domain.repository import CommentRepository, UnitOfWork
from threadline.domain.value import CommentId

from .base import Service, span_id
from .counter_service import CounterService


class CommentService(Service):
    """Domain service for single-comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        counter_service: CounterService,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            counter_service: Maintains parent child counters
            unit_of_work: Atomic scope for insert + counter increment
        """
        self.comment_repository = comment_repository
        self.counter_service = counter_service
        self.unit_of_work = unit_of_work

    async def create_comment(
        self, text: str, parent_id: CommentId | None = None
    ) -> Comment:
        """Create a top-level comment or a reply.

        The caller is responsible for checking that the parent exists.
        The insert and the parent counter increment commit together.

        Args:
            text: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If the text is blank
        """
        text = _normalize_text(text)
        with logfire.span(
            "comment_service.create_comment",
            parent_id=span_id(parent_id),
            text_length=len(text),
        ):
            async with self.unit_of_work.atomic():
                comment = await self.comment_repository.create(text, parent_id)
                if parent_id:
                    await self.counter_service.adjust(parent_id, 1)

            logfire.info(
                "Comment created",
                comment_id=str(comment.id),
                parent_id=span_id(parent_id),
            )
            return comment

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a live comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def exists(self, comment_id: CommentId) -> bool:
        """Check whether a live comment exists."""
        with logfire.span("comment_service.exists", comment_id=str(comment_id)):
            return await self.comment_repository.exists(comment_id)

    async def update_text(self, comment_id: CommentId, text: str) -> Comment | None:
        """Update the text content of a comment.

        Args:
            comment_id: Comment ID
            text: New text content

        Returns:
            Updated comment if found and updated, None if comment doesn't exist or is deleted
        """
        text = _normalize_text(text)
        with logfire.span(
            "comment_service.update_text",
            comment_id=str(comment_id),
            text_length=len(text),
        ):
            updated = await self.comment_repository.update_text(comment_id, text)

            if updated:
                logfire.info(
                    "Comment text updated",
                    comment_id=str(comment_id),
                    text_length=len(updated.text),
                )
            else:
                logfire.warn(
                    "Comment not found or deleted for text update",
                    comment_id=str(comment_id),
                )

            return updated


def _normalize_text(text: str) -> str:
    text = text.strip()
    if not text:
        raise ValidationError("Comment text must not be blank")
    return text
