"""Sort selection for comment listings.

A closed mapping from the public sort selectors to a concrete field and
direction. Every order is completed by ``id DESC`` so that ties on the
primary field always resolve the same way.
"""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from threadline.domain.value.identifiers import CommentId

if TYPE_CHECKING:
    from threadline.domain.model.comment import Comment


class CommentSort(str, Enum):
    """Sort selectors accepted by comment listings."""

    CREATED_AT_ASC = "createdAt_asc"
    CREATED_AT_DESC = "createdAt_desc"
    UPDATED_AT_ASC = "updatedAt_asc"
    UPDATED_AT_DESC = "updatedAt_desc"
    TEXT_ASC = "text_asc"
    TEXT_DESC = "text_desc"


class SortField(str, Enum):
    """Comment fields that can drive an ordering."""

    ID = "id"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"
    TEXT = "text"


class SortSpec(BaseModel):
    """Concrete ordering: primary field and direction, tie-broken by id DESC."""

    model_config = ConfigDict(frozen=True)

    field: SortField
    descending: bool

    @property
    def is_id_order(self) -> bool:
        """Whether the primary key of the ordering is the id itself."""
        return self.field == SortField.ID


DEFAULT_SORT = SortSpec(field=SortField.ID, descending=True)

SORT_POLICY: dict[CommentSort, SortSpec] = {
    CommentSort.CREATED_AT_ASC: SortSpec(field=SortField.CREATED_AT, descending=False),
    CommentSort.CREATED_AT_DESC: SortSpec(field=SortField.CREATED_AT, descending=True),
    CommentSort.UPDATED_AT_ASC: SortSpec(field=SortField.UPDATED_AT, descending=False),
    CommentSort.UPDATED_AT_DESC: SortSpec(field=SortField.UPDATED_AT, descending=True),
    CommentSort.TEXT_ASC: SortSpec(field=SortField.TEXT, descending=False),
    CommentSort.TEXT_DESC: SortSpec(field=SortField.TEXT, descending=True),
}


def parse_sort(selector: CommentSort | str | None) -> CommentSort | None:
    """Parse a raw selector, returning None for anything unrecognized."""
    if selector is None or isinstance(selector, CommentSort):
        return selector
    try:
        return CommentSort(selector)
    except ValueError:
        return None


def resolve_sort(selector: CommentSort | str | None) -> SortSpec:
    """Map a sort selector to its ordering.

    Args:
        selector: Enum member, raw selector string, or None

    Returns:
        The matching SortSpec, or DEFAULT_SORT (most recent id first) when
        the selector is absent or unknown
    """
    sort = parse_sort(selector)
    if sort is None:
        return DEFAULT_SORT
    return SORT_POLICY[sort]


class CursorPosition(BaseModel):
    """Position of the last comment of a cursor page.

    sort_value holds that comment's value for the primary sort field. It is
    None for id ordering, or when the cursor comment can no longer be found,
    in which case only the id bounds the next page.
    """

    model_config = ConfigDict(frozen=True)

    id: CommentId
    sort_value: datetime | str | None = None

    @classmethod
    def from_comment(cls, comment: "Comment", sort: SortSpec) -> "CursorPosition":
        """Build the position of ``comment`` under ``sort``."""
        if sort.is_id_order:
            return cls(id=comment.id)
        return cls(id=comment.id, sort_value=getattr(comment, sort.field.value))
