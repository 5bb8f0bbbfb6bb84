"""Test configuration and fixtures."""

from datetime import datetime, timedelta

from threadline.domain.model import Comment
from threadline.domain.value import CommentId, new_comment_id


def make_comment(
    text: str = "Test comment",
    parent_id: CommentId | None = None,
    comment_id: CommentId | None = None,
    total_sub_comments: int = 0,
    is_deleted: bool = False,
    created_at: datetime | None = None,
    updated_at: datetime | None = None,
) -> Comment:
    """Helper function to build comments for repository setup.

    Args:
        text: Comment text
        parent_id: Parent comment ID, None for top-level comments
        comment_id: Explicit ID (a fresh time-ordered ID by default)
        total_sub_comments: Initial child counter
        is_deleted: Whether the comment is already soft-deleted
        created_at: Creation time (now by default)
        updated_at: Last update time (created_at by default)

    Returns:
        Comment ready to be saved in an in-memory repository
    """
    created_at = created_at or datetime.now()
    return Comment(
        id=comment_id or new_comment_id(),
        text=text,
        parent_id=parent_id,
        total_sub_comments=total_sub_comments,
        is_deleted=is_deleted,
        created_at=created_at,
        updated_at=updated_at or created_at,
        deleted_at=created_at + timedelta(seconds=1) if is_deleted else None,
    )
