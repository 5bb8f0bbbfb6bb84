"""Integration tests for PostgresCommentRepository.

Require a migrated PostgreSQL database reachable at DATABASE__URL.
"""

import os

import pytest

from threadline.domain.repository import CommentRepository
from threadline.domain.service import (
    CascadeDeleteService,
    CommentService,
    PaginationService,
)
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ,
    reason="PostgreSQL not configured (set DATABASE__URL)",
)

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


class TestCommentRepositoryIntegration:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_create_uses_column_defaults(self, integration_env):
        """Timestamps and counters come from the database defaults."""
        comment_repo = await integration_env.get(CommentRepository)

        comment = await comment_repo.create("Hello from postgres")

        assert comment.total_sub_comments == 0
        assert comment.is_deleted is False
        assert comment.created_at is not None
        assert comment.updated_at is not None

    @pytest.mark.asyncio
    async def test_cascade_delete_and_counter(self, integration_env):
        """Cascade marks the subtree and decrements the root's parent."""
        # Arrange
        comment_service = await integration_env.get(CommentService)
        cascade_service = await integration_env.get(CascadeDeleteService)
        comment_repo = await integration_env.get(CommentRepository)
        a = await comment_service.create_comment("A")
        b = await comment_service.create_comment("B", parent_id=a.id)
        await comment_service.create_comment("C", parent_id=a.id)
        d = await comment_service.create_comment("D", parent_id=b.id)

        # Act
        result = await cascade_service.delete(b.id)

        # Assert
        assert result.deleted_count == 2
        assert await comment_repo.find_by_id(d.id) is None
        assert (await comment_repo.find_by_id(a.id)).total_sub_comments == 1
        assert await comment_repo.adjust_sub_comment_count(b.id, 1) is False

    @pytest.mark.asyncio
    async def test_counter_never_negative(self, integration_env):
        comment_repo = await integration_env.get(CommentRepository)
        comment = await comment_repo.create("Lonely")

        assert await comment_repo.adjust_sub_comment_count(comment.id, -1) is False

    @pytest.mark.asyncio
    async def test_text_sorted_cursor_walk(self, integration_env):
        """Keyset cursor on (text, id) partitions the sorted replies."""
        # Arrange
        comment_service = await integration_env.get(CommentService)
        pagination_service = await integration_env.get(PaginationService)
        parent = await comment_service.create_comment("Parent")
        for text in ("delta", "alpha", "charlie", "bravo", "alpha"):
            await comment_service.create_comment(text, parent_id=parent.id)

        # Act
        texts = []
        cursor = None
        while True:
            page = await pagination_service.list_after_cursor(
                parent_id=parent.id, cursor=cursor, limit=2, sort="text_asc"
            )
            texts.extend(c.text for c in page.items)
            if not page.meta.has_more:
                break
            cursor = page.meta.next_cursor

        # Assert
        assert texts == ["alpha", "alpha", "bravo", "charlie", "delta"]
