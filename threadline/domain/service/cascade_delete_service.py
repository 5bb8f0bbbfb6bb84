"""Cascading soft deletion of comment subtrees."""

import asyncio
from datetime import datetime

import logfire

from threadline.domain.error import CascadeTimeoutError
from threadline.domain.model import CascadeDeleteResult
from threadline.domain.repository import CommentRepository, UnitOfWork
from threadline.domain.value import CommentId

from .base import Service, span_id
from .counter_service import CounterService


class CascadeDeleteService(Service):
    """Soft-deletes a comment together with all of its descendants.

    The subtree is walked level by level with one query per level, so the
    number of store round-trips is bounded by the depth of the tree and the
    call stack does not grow with it. Marking the subtree deleted and
    decrementing the root's parent counter happen in a single unit of work.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        counter_service: CounterService,
        unit_of_work: UnitOfWork,
        timeout: float | None = None,
    ) -> None:
        """Initialize cascade delete service.

        Args:
            comment_repository: Comment repository
            counter_service: Maintains parent child counters
            unit_of_work: Atomic scope for bulk mark + counter decrement
            timeout: Deadline in seconds for the whole operation (None = no deadline)
        """
        self.comment_repository = comment_repository
        self.counter_service = counter_service
        self.unit_of_work = unit_of_work
        self.timeout = timeout

    async def delete(self, comment_id: CommentId) -> CascadeDeleteResult | None:
        """Delete a comment and its whole subtree.

        Args:
            comment_id: Root of the subtree to delete

        Returns:
            Pre-deletion snapshot of the root and the number of comments
            deleted (root included), or None if the root is not a live comment

        Raises:
            CascadeTimeoutError: If the deadline expires; nothing is deleted
        """
        with logfire.span(
            "cascade_delete_service.delete",
            comment_id=str(comment_id),
            timeout=self.timeout,
        ):
            deadline = asyncio.timeout(self.timeout)
            try:
                async with deadline:
                    return await self._delete(comment_id)
            except TimeoutError:
                if not deadline.expired():
                    raise
                logfire.error(
                    "Cascade delete deadline exceeded",
                    comment_id=str(comment_id),
                    timeout=self.timeout,
                )
                raise CascadeTimeoutError(str(comment_id), self.timeout) from None

    async def _delete(self, comment_id: CommentId) -> CascadeDeleteResult | None:
        root = await self.comment_repository.find_by_id(comment_id)
        if root is None:
            logfire.warn("Cascade delete root not found", comment_id=str(comment_id))
            return None

        subtree = await self.collect_subtree(root.id)
        deleted_at = datetime.now()

        async with self.unit_of_work.atomic():
            marked = await self.comment_repository.mark_deleted(subtree, deleted_at)
            # Descendants' parents are in the subtree, so only the root's
            # parent needs a decrement.
            if root.parent_id:
                await self.counter_service.adjust(root.parent_id, -1)

        logfire.info(
            "Comment subtree deleted",
            comment_id=str(root.id),
            parent_id=span_id(root.parent_id),
            deleted_count=len(subtree),
            newly_marked=marked,
        )
        return CascadeDeleteResult(root=root, deleted_count=len(subtree))

    async def collect_subtree(self, root_id: CommentId) -> set[CommentId]:
        """Collect the ids of a comment and all its live descendants.

        Ids already collected are never expanded twice, so a corrupted
        parent chain that loops back on itself still terminates.

        Args:
            root_id: Subtree root

        Returns:
            Root id plus the ids of every live descendant
        """
        collected: set[CommentId] = {root_id}
        frontier: set[CommentId] = {root_id}
        level = 0

        while frontier:
            children = await self.comment_repository.find_children_ids(frontier)
            frontier = children - collected
            collected |= frontier
            level += 1
            logfire.debug(
                "Cascade level expanded",
                root_id=str(root_id),
                level=level,
                found=len(frontier),
            )

        return collected
