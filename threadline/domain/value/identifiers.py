"""Strongly typed identifiers for Threadline domain entities.

Using NewType for strong typing prevents mixing comment ids with other
UUIDs and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

from uuid6 import uuid7

CommentId = NewType("CommentId", UUID)


def new_comment_id() -> CommentId:
    """Generate a time-ordered comment identifier.

    UUIDv7 values sort by creation time, so "descending id" is the same as
    "most recent first". Cursor pagination relies on this.
    """
    return CommentId(uuid7())
