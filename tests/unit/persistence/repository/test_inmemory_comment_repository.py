"""Unit tests for the in-memory comment repository."""

from datetime import datetime

import pytest

from threadline.domain.value import (
    CommentSort,
    CursorPosition,
    new_comment_id,
    resolve_sort,
)
from threadline.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryCommentStore,
    InMemoryUnitOfWork,
)
from tests.conftest import make_comment


@pytest.fixture
def store():
    return InMemoryCommentStore()


@pytest.fixture
def comment_repo(store):
    return InMemoryCommentRepository(store)


class TestReads:
    """Tests for single-comment reads."""

    @pytest.mark.asyncio
    async def test_deleted_hidden_except_when_asked(self, comment_repo):
        comment = await comment_repo.save(make_comment(is_deleted=True))

        assert await comment_repo.find_by_id(comment.id) is None
        assert await comment_repo.exists(comment.id) is False
        found = await comment_repo.find_by_id_including_deleted(comment.id)
        assert found is not None
        assert found.is_deleted

    @pytest.mark.asyncio
    async def test_create_assigns_defaults(self, comment_repo):
        parent_id = new_comment_id()

        comment = await comment_repo.create("Reply", parent_id)

        assert comment.parent_id == parent_id
        assert comment.total_sub_comments == 0
        assert comment.is_deleted is False
        assert comment.deleted_at is None
        assert comment.created_at == comment.updated_at


class TestBulkOperations:
    """Tests for traversal and bulk marking."""

    @pytest.mark.asyncio
    async def test_find_children_ids_of_many_parents(self, comment_repo):
        """Children of every given parent are returned, deleted ones skipped."""
        # Arrange
        p1 = await comment_repo.save(make_comment(text="P1"))
        p2 = await comment_repo.save(make_comment(text="P2"))
        c1 = await comment_repo.save(make_comment(parent_id=p1.id))
        c2 = await comment_repo.save(make_comment(parent_id=p2.id))
        await comment_repo.save(make_comment(parent_id=p2.id, is_deleted=True))
        await comment_repo.save(make_comment(parent_id=c1.id))

        # Act
        children = await comment_repo.find_children_ids({p1.id, p2.id})

        # Assert
        assert children == {c1.id, c2.id}

    @pytest.mark.asyncio
    async def test_mark_deleted_counts_only_live(self, comment_repo):
        """Already-deleted comments are not re-marked."""
        # Arrange
        live = await comment_repo.save(make_comment())
        gone = await comment_repo.save(make_comment(is_deleted=True))
        at = datetime(2025, 6, 1, 9, 30)

        # Act
        marked = await comment_repo.mark_deleted({live.id, gone.id}, at)

        # Assert
        assert marked == 1
        stored = await comment_repo.find_by_id_including_deleted(live.id)
        assert stored.is_deleted
        assert stored.deleted_at == at
        previously = await comment_repo.find_by_id_including_deleted(gone.id)
        assert previously.deleted_at == gone.deleted_at


class TestListing:
    """Tests for find_page, find_after_cursor and count."""

    @pytest.mark.asyncio
    async def test_updated_at_desc_order(self, comment_repo):
        # Arrange
        older = await comment_repo.save(
            make_comment(text="older", updated_at=datetime(2025, 1, 1))
        )
        newer = await comment_repo.save(
            make_comment(text="newer", updated_at=datetime(2025, 3, 1))
        )
        middle = await comment_repo.save(
            make_comment(text="middle", updated_at=datetime(2025, 2, 1))
        )

        # Act
        items = await comment_repo.find_page(
            None, resolve_sort(CommentSort.UPDATED_AT_DESC), limit=10, offset=0
        )

        # Assert
        assert [c.id for c in items] == [newer.id, middle.id, older.id]

    @pytest.mark.asyncio
    async def test_cursor_on_text_sort_uses_sort_value(self, comment_repo):
        """The cursor bound follows the sort field, not id order."""
        # Arrange
        b = await comment_repo.save(make_comment(text="b"))
        a = await comment_repo.save(make_comment(text="a"))
        c = await comment_repo.save(make_comment(text="c"))
        sort = resolve_sort("text_asc")

        # Act
        after_a = await comment_repo.find_after_cursor(
            None, sort, limit=10, cursor=CursorPosition.from_comment(a, sort)
        )

        # Assert
        assert [x.id for x in after_a] == [b.id, c.id]

    @pytest.mark.asyncio
    async def test_cursor_without_sort_value_bounds_by_id(self, comment_repo):
        first = await comment_repo.save(make_comment(text="z"))
        second = await comment_repo.save(make_comment(text="y"))

        items = await comment_repo.find_after_cursor(
            None, resolve_sort("text_asc"), limit=10, cursor=CursorPosition(id=second.id)
        )

        assert [x.id for x in items] == [first.id]

    @pytest.mark.asyncio
    async def test_count_by_parent(self, comment_repo):
        parent = await comment_repo.save(make_comment())
        await comment_repo.save(make_comment(parent_id=parent.id))
        await comment_repo.save(make_comment(parent_id=parent.id, is_deleted=True))

        assert await comment_repo.count(parent.id) == 1
        assert await comment_repo.count(None) == 1


class TestInMemoryUnitOfWork:
    """Tests for the snapshot unit of work."""

    @pytest.mark.asyncio
    async def test_failure_restores_snapshot(self, store, comment_repo):
        # Arrange
        comment = await comment_repo.save(make_comment())
        unit_of_work = InMemoryUnitOfWork(store)

        # Act
        with pytest.raises(RuntimeError):
            async with unit_of_work.atomic():
                await comment_repo.mark_deleted({comment.id}, datetime.now())
                await comment_repo.create("Orphan")
                raise RuntimeError("boom")

        # Assert
        assert await comment_repo.find_by_id(comment.id) is not None
        assert await comment_repo.count(None) == 1

    @pytest.mark.asyncio
    async def test_success_keeps_changes(self, store, comment_repo):
        unit_of_work = InMemoryUnitOfWork(store)

        async with unit_of_work.atomic():
            await comment_repo.create("Kept")

        assert await comment_repo.count(None) == 1
