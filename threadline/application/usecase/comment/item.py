"""Comment representation shared by comment use cases."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from threadline.domain.model import Comment


class CamelModel(BaseModel):
    """Response model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CommentItem(CamelModel):
    """Comment item in responses."""

    id: str
    text: str
    total_sub_comments: int
    parent_id: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        """Build the response item for a domain comment."""
        return cls(
            id=str(comment.id),
            text=comment.text,
            total_sub_comments=comment.total_sub_comments,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
