"""Comment entity.

Comments form a forest: each comment optionally points at a parent, and a
parent keeps a denormalized count of its live direct children.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from threadline.domain.model.common import DomainModel
from threadline.domain.value import CommentId


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level), never changes
    - total_sub_comments: Number of live direct replies, maintained eagerly

    Deletion is soft: is_deleted/deleted_at are set and the row is kept.
    """

    id: CommentId
    text: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    total_sub_comments: int = Field(default=0, ge=0)
    is_deleted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @field_validator("text")
    @classmethod
    def strip_text(cls, v: str) -> str:
        """Trim surrounding whitespace; blank text is rejected."""
        v = v.strip()
        if not v:
            raise ValueError("Comment text must not be blank")
        return v

    @property
    def is_root(self) -> bool:
        """Whether this is a top-level comment."""
        return self.parent_id is None
