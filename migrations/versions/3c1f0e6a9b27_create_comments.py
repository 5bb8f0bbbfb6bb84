"""create_comments

Create the threaded comments table:
- Self-referencing parent_id (NULL for top-level comments)
- Denormalized total_sub_comments counter of live direct replies
- Soft delete via is_deleted / deleted_at

Revision ID: 3c1f0e6a9b27
Revises:
Create Date: 2026-10-19 10:12:44.518301

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0e6a9b27"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "comments",
        # Ids are UUIDv7 generated by the application so they sort by creation
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column(
            "total_sub_comments",
            sa.Integer(),
            server_default=sa.text("0"),
            nullable=False,
        ),
        sa.Column(
            "is_deleted",
            sa.Boolean(),
            server_default=sa.text("false"),
            nullable=False,
        ),
        sa.Column("deleted_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(
            ["parent_id"], ["comments.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "total_sub_comments >= 0", name="total_sub_comments_non_negative"
        ),
    )

    op.create_index(
        "idx_comments_parent_id_is_deleted",
        "comments",
        ["parent_id", "is_deleted"],
    )
    op.create_index("idx_comments_created_at", "comments", ["created_at"])
    op.create_index("idx_comments_updated_at", "comments", ["updated_at"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_updated_at", table_name="comments")
    op.drop_index("idx_comments_created_at", table_name="comments")
    op.drop_index("idx_comments_parent_id_is_deleted", table_name="comments")
    op.drop_table("comments")
