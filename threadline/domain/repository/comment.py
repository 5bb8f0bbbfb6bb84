"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from threadline.domain.model.comment import Comment
from threadline.domain.value import CommentId, CursorPosition, SortSpec


class CommentRepository(ABC):
    """Repository for the Comment entity.

    Every read excludes soft-deleted comments unless the method name says
    otherwise. Implementations live in the persistence layer; store errors
    are propagated to the caller unchanged.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a live comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found and not deleted, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_including_deleted(
        self, comment_id: CommentId
    ) -> Optional[Comment]:
        """Find a comment by ID whether or not it is deleted.

        Only used to resolve the sort key of a cursor position.
        """
        pass

    @abstractmethod
    async def exists(self, comment_id: CommentId) -> bool:
        """Check whether a live comment with this ID exists."""
        pass

    @abstractmethod
    async def create(self, text: str, parent_id: Optional[CommentId] = None) -> Comment:
        """Insert a new comment.

        The repository assigns the id and timestamps. The counter starts at 0
        and the comment is not deleted. Parent existence is NOT checked here.

        Args:
            text: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def update_text(self, comment_id: CommentId, text: str) -> Optional[Comment]:
        """Replace the text of a live comment.

        Args:
            comment_id: The comment ID
            text: New text content

        Returns:
            The updated comment, or None if it does not exist or is deleted
        """
        pass

    @abstractmethod
    async def find_children_ids(self, parent_ids: set[CommentId]) -> set[CommentId]:
        """Return ids of live comments whose parent is in ``parent_ids``."""
        pass

    @abstractmethod
    async def mark_deleted(self, comment_ids: set[CommentId], at: datetime) -> int:
        """Soft-delete comments in bulk.

        Already-deleted ids are left untouched, so the call is idempotent.

        Args:
            comment_ids: Comments to mark deleted
            at: Deletion timestamp stamped on every newly deleted comment

        Returns:
            Number of comments newly marked deleted
        """
        pass

    @abstractmethod
    async def adjust_sub_comment_count(self, comment_id: CommentId, delta: int) -> bool:
        """Atomically add ``delta`` to a live comment's child counter.

        The counter never drops below zero.

        Returns:
            True if a live comment was updated, False otherwise
        """
        pass

    @abstractmethod
    async def find_page(
        self,
        parent_id: Optional[CommentId],
        sort: SortSpec,
        limit: int,
        offset: int,
    ) -> List[Comment]:
        """Find live children of ``parent_id`` (roots when None), offset paginated.

        Args:
            parent_id: Parent filter, None selects top-level comments
            sort: Ordering, always tie-broken by id DESC
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            Comments in the requested order
        """
        pass

    @abstractmethod
    async def find_after_cursor(
        self,
        parent_id: Optional[CommentId],
        sort: SortSpec,
        limit: int,
        cursor: Optional[CursorPosition] = None,
    ) -> List[Comment]:
        """Find live children of ``parent_id`` positioned after ``cursor``.

        "After" means strictly later in the (sort field, id DESC) ordering,
        so pages partition the sorted sequence for every sort field. When
        the position carries no sort value (id ordering, or an unknown
        cursor) this reduces to ``id < cursor.id``.

        Args:
            parent_id: Parent filter, None selects top-level comments
            sort: Ordering, always tie-broken by id DESC
            limit: Maximum number of comments to return
            cursor: Position of the last comment of the previous page, None
                for the first page

        Returns:
            Comments in the requested order
        """
        pass

    @abstractmethod
    async def count(self, parent_id: Optional[CommentId]) -> int:
        """Count live children of ``parent_id`` (roots when None)."""
        pass
