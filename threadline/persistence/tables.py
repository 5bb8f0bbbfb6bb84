"""SQLAlchemy table definitions for Threadline.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),  # UUIDv7, set by the app
    Column("text", Text, nullable=False),
    Column(
        "parent_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="RESTRICT"),
        nullable=True,
    ),
    Column("total_sub_comments", Integer, nullable=False, server_default="0"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("total_sub_comments >= 0", name="total_sub_comments_non_negative"),
)

# Listing and cascade traversal both filter on (parent_id, is_deleted)
Index(
    "idx_comments_parent_id_is_deleted",
    comments_table.c.parent_id,
    comments_table.c.is_deleted,
)
Index("idx_comments_created_at", comments_table.c.created_at)
Index("idx_comments_updated_at", comments_table.c.updated_at)
