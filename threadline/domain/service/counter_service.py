"""Child counter maintenance."""

import logfire

from threadline.domain.error import ValidationError
from threadline.domain.repository import CommentRepository
from threadline.domain.value import CommentId

from .base import Service


class CounterService(Service):
    """Keeps ``total_sub_comments`` in step with child creation and deletion."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize counter service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def adjust(self, parent_id: CommentId, delta: int) -> bool:
        """Atomically add ``delta`` (+1 or -1) to a parent's child counter.

        A parent that is missing or already deleted is skipped without error;
        its counter may go stale if it was deleted concurrently.

        Args:
            parent_id: Parent comment ID
            delta: +1 when a child is created, -1 when one is deleted

        Returns:
            True if the counter was changed, False if the parent is not live

        Raises:
            ValidationError: If delta is not +1 or -1
        """
        if delta not in (1, -1):
            raise ValidationError(f"Counter delta must be +1 or -1, got {delta}")

        with logfire.span(
            "counter_service.adjust", parent_id=str(parent_id), delta=delta
        ):
            adjusted = await self.comment_repository.adjust_sub_comment_count(
                parent_id, delta
            )
            if adjusted:
                logfire.info(
                    "Sub-comment counter adjusted",
                    parent_id=str(parent_id),
                    delta=delta,
                )
            else:
                logfire.warn(
                    "Sub-comment counter not adjusted, parent not live",
                    parent_id=str(parent_id),
                    delta=delta,
                )
            return adjusted
