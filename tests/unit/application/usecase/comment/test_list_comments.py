"""Unit tests for the listing use cases."""

from datetime import datetime, timedelta

import pytest

from threadline.application.usecase.comment import (
    ListCommentsByCursorRequest,
    ListCommentsByCursorUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
)
from threadline.domain.repository import CommentRepository
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListCommentsUseCase:
    """Tests for ListCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_replies_with_offset_meta(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        parent = await comment_repo.save(make_comment(text="Parent"))
        replies = [
            await comment_repo.save(make_comment(text=f"R{i}", parent_id=parent.id))
            for i in range(3)
        ]

        # Act
        response = await use_case.execute(
            ListCommentsRequest(parent_id=str(parent.id), page=1, limit=2)
        )

        # Assert
        assert [c.id for c in response.comments] == [
            str(replies[2].id),
            str(replies[1].id),
        ]
        assert response.meta.model_dump(by_alias=True) == {
            "page": 1,
            "limit": 2,
            "total": 3,
        }

    @pytest.mark.asyncio
    async def test_malformed_parent_id_raises_value_error(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(ListCommentsRequest(parent_id="nope"))


class TestListCommentsByCursorUseCase:
    """Tests for ListCommentsByCursorUseCase."""

    @pytest.mark.asyncio
    async def test_cursor_meta_is_camel_cased(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListCommentsByCursorUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        start = datetime(2025, 1, 1)
        saved = [
            await comment_repo.save(
                make_comment(text=f"C{i}", created_at=start + timedelta(minutes=i))
            )
            for i in range(3)
        ]

        # Act
        response = await use_case.execute(
            ListCommentsByCursorRequest(limit=2, sort="createdAt_asc")
        )

        # Assert
        assert [c.id for c in response.comments] == [str(saved[0].id), str(saved[1].id)]
        assert response.meta.model_dump(by_alias=True, mode="json") == {
            "nextCursor": str(saved[1].id),
            "hasMore": True,
            "limit": 2,
            "sort": "createdAt_asc",
        }
