"""Mapping between database rows and domain models."""

from typing import Any, Dict
from uuid import UUID

from threadline.domain.model import Comment
from threadline.domain.value import CommentId


def _to_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_to_uuid(row["id"])),
        text=row["text"],
        parent_id=CommentId(_to_uuid(row["parent_id"]))
        if row.get("parent_id")
        else None,
        total_sub_comments=row["total_sub_comments"],
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )
