"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from threadline.domain.model.comment import Comment
from threadline.domain.repository.comment import CommentRepository
from threadline.domain.value import CommentId, CursorPosition, SortSpec, new_comment_id


class InMemoryCommentStore:
    """Comment rows shared by every repository and unit of work of a container."""

    def __init__(self) -> None:
        self.comments: dict[CommentId, Comment] = {}


def _sorted(comments: list[Comment], sort: SortSpec) -> list[Comment]:
    # Stable sorts: id DESC first, then the primary field on top of it
    ordered = sorted(comments, key=lambda c: c.id, reverse=True)
    if not sort.is_id_order:
        ordered.sort(key=lambda c: getattr(c, sort.field.value), reverse=sort.descending)
    elif not sort.descending:
        ordered.reverse()
    return ordered


def _is_after(comment: Comment, sort: SortSpec, cursor: CursorPosition) -> bool:
    if sort.is_id_order:
        return comment.id < cursor.id if sort.descending else comment.id > cursor.id
    if cursor.sort_value is None:
        return comment.id < cursor.id

    value = getattr(comment, sort.field.value)
    if value == cursor.sort_value:
        return comment.id < cursor.id
    return value < cursor.sort_value if sort.descending else value > cursor.sort_value


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryCommentStore | None = None) -> None:
        self.store = store or InMemoryCommentStore()

    @property
    def _comments(self) -> dict[CommentId, Comment]:
        return self.store.comments

    def _live_children(self, parent_id: Optional[CommentId]) -> list[Comment]:
        return [
            c
            for c in self._comments.values()
            if c.parent_id == parent_id and not c.is_deleted
        ]

    async def save(self, comment: Comment) -> Comment:
        """Store a comment as-is (test setup helper)."""
        self._comments[comment.id] = comment
        return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a live comment by ID."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None
        return comment

    async def find_by_id_including_deleted(
        self, comment_id: CommentId
    ) -> Optional[Comment]:
        """Find a comment by ID, deleted or not."""
        return self._comments.get(comment_id)

    async def exists(self, comment_id: CommentId) -> bool:
        """Check whether a live comment exists."""
        return await self.find_by_id(comment_id) is not None

    async def create(self, text: str, parent_id: Optional[CommentId] = None) -> Comment:
        """Insert a new comment."""
        now = datetime.now()
        comment = Comment(
            id=new_comment_id(),
            text=text,
            parent_id=parent_id,
            total_sub_comments=0,
            is_deleted=False,
            created_at=now,
            updated_at=now,
            deleted_at=None,
        )
        self._comments[comment.id] = comment
        return comment

    async def update_text(self, comment_id: CommentId, text: str) -> Optional[Comment]:
        """Update the text content of a live comment."""
        comment = await self.find_by_id(comment_id)
        if comment is None:
            return None

        updated = comment.model_copy(update={"text": text, "updated_at": datetime.now()})
        self._comments[comment_id] = updated
        return updated

    async def find_children_ids(self, parent_ids: set[CommentId]) -> set[CommentId]:
        """Find ids of live children of any of the given parents."""
        return {
            c.id
            for c in self._comments.values()
            if c.parent_id in parent_ids and not c.is_deleted
        }

    async def mark_deleted(self, comment_ids: set[CommentId], at: datetime) -> int:
        """Soft-delete comments in bulk, skipping those already deleted."""
        marked = 0
        for comment_id in comment_ids:
            comment = self._comments.get(comment_id)
            if comment is None or comment.is_deleted:
                continue
            self._comments[comment_id] = comment.model_copy(
                update={"is_deleted": True, "deleted_at": at, "updated_at": datetime.now()}
            )
            marked += 1
        return marked

    async def adjust_sub_comment_count(self, comment_id: CommentId, delta: int) -> bool:
        """Add delta to the child counter of a live comment (never below zero)."""
        comment = await self.find_by_id(comment_id)
        if comment is None or comment.total_sub_comments + delta < 0:
            return False

        self._comments[comment_id] = comment.model_copy(
            update={
                "total_sub_comments": comment.total_sub_comments + delta,
                "updated_at": datetime.now(),
            }
        )
        return True

    async def find_page(
        self,
        parent_id: Optional[CommentId],
        sort: SortSpec,
        limit: int,
        offset: int,
    ) -> list[Comment]:
        """Find live children of a parent, offset paginated."""
        comments = _sorted(self._live_children(parent_id), sort)
        return comments[offset : offset + limit]

    async def find_after_cursor(
        self,
        parent_id: Optional[CommentId],
        sort: SortSpec,
        limit: int,
        cursor: Optional[CursorPosition] = None,
    ) -> list[Comment]:
        """Find live children of a parent that follow the cursor position."""
        comments = self._live_children(parent_id)
        if cursor is not None:
            comments = [c for c in comments if _is_after(c, sort, cursor)]
        return _sorted(comments, sort)[:limit]

    async def count(self, parent_id: Optional[CommentId]) -> int:
        """Count live children of a parent."""
        return len(self._live_children(parent_id))
