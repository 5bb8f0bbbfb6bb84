"""Unit tests for CascadeDeleteService."""

import asyncio

import pytest

from threadline.domain.error import CascadeTimeoutError
from threadline.domain.repository import CommentRepository
from threadline.domain.service import (
    CascadeDeleteService,
    CommentService,
    CounterService,
)
from threadline.domain.value import new_comment_id
from threadline.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryCommentStore,
    InMemoryUnitOfWork,
)
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class SlowCommentRepository(InMemoryCommentRepository):
    """Repository whose traversal queries hang."""

    async def find_children_ids(self, parent_ids):
        await asyncio.sleep(5)
        return await super().find_children_ids(parent_ids)


class FailingCounterService(CounterService):
    """Counter service whose store write fails."""

    async def adjust(self, parent_id, delta):
        raise RuntimeError("store unavailable")


async def _build_thread(comment_service: CommentService):
    """Build the thread used by most tests.

    A
    ├── B
    │   ├── D
    │   └── E
    └── C
    """
    a = await comment_service.create_comment(text="A")
    b = await comment_service.create_comment(text="B", parent_id=a.id)
    c = await comment_service.create_comment(text="C", parent_id=a.id)
    d = await comment_service.create_comment(text="D", parent_id=b.id)
    e = await comment_service.create_comment(text="E", parent_id=b.id)
    return a, b, c, d, e


class TestDelete:
    """Tests for delete method."""

    @pytest.mark.asyncio
    async def test_delete_subtree_decrements_parent(self, unit_env):
        """Deleting B removes B, D and E and drops A's counter to 1."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        cascade_service = await unit_env.get(CascadeDeleteService)
        comment_repo = await unit_env.get(CommentRepository)
        a, b, c, d, e = await _build_thread(comment_service)

        # Act
        result = await cascade_service.delete(b.id)

        # Assert
        assert result is not None
        assert result.deleted_count == 3
        assert result.root.id == b.id
        assert result.root.is_deleted is False  # pre-deletion snapshot

        for comment in (b, d, e):
            assert await comment_repo.find_by_id(comment.id) is None
            stored = await comment_repo.find_by_id_including_deleted(comment.id)
            assert stored.is_deleted
            assert stored.deleted_at is not None

        assert await comment_repo.find_by_id(c.id) is not None
        updated_a = await comment_repo.find_by_id(a.id)
        assert updated_a.total_sub_comments == 1

    @pytest.mark.asyncio
    async def test_delete_root_removes_whole_thread(self, unit_env):
        """Deleting a top-level comment removes every descendant."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        cascade_service = await unit_env.get(CascadeDeleteService)
        comment_repo = await unit_env.get(CommentRepository)
        a, b, c, d, e = await _build_thread(comment_service)

        # Act
        result = await cascade_service.delete(a.id)

        # Assert
        assert result.deleted_count == 5
        for comment in (a, b, c, d, e):
            assert await comment_repo.find_by_id(comment.id) is None
        assert await comment_repo.count(None) == 0

    @pytest.mark.asyncio
    async def test_delete_leaf(self, unit_env):
        """Deleting a leaf deletes only the leaf."""
        comment_service = await unit_env.get(CommentService)
        cascade_service = await unit_env.get(CascadeDeleteService)
        comment_repo = await unit_env.get(CommentRepository)
        a, b, c, d, e = await _build_thread(comment_service)

        result = await cascade_service.delete(d.id)

        assert result.deleted_count == 1
        assert (await comment_repo.find_by_id(b.id)).total_sub_comments == 1
        assert (await comment_repo.find_by_id(a.id)).total_sub_comments == 2

    @pytest.mark.asyncio
    async def test_delete_twice_is_not_found(self, unit_env):
        """A second delete finds nothing and changes no counters."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        cascade_service = await unit_env.get(CascadeDeleteService)
        comment_repo = await unit_env.get(CommentRepository)
        a, b, c, d, e = await _build_thread(comment_service)
        await cascade_service.delete(c.id)

        # Act
        second = await cascade_service.delete(c.id)

        # Assert
        assert second is None
        assert (await comment_repo.find_by_id(a.id)).total_sub_comments == 1

    @pytest.mark.asyncio
    async def test_delete_missing_comment_returns_none(self, unit_env):
        cascade_service = await unit_env.get(CascadeDeleteService)

        assert await cascade_service.delete(new_comment_id()) is None

    @pytest.mark.asyncio
    async def test_counter_failure_rolls_back_marks(self):
        """If the parent decrement fails, nothing stays marked deleted."""
        # Arrange
        store = InMemoryCommentStore()
        comment_repo = InMemoryCommentRepository(store)
        parent = await comment_repo.save(make_comment(text="Parent", total_sub_comments=1))
        child = await comment_repo.save(make_comment(text="Child", parent_id=parent.id))
        grandchild = await comment_repo.save(
            make_comment(text="Grandchild", parent_id=child.id)
        )
        cascade_service = CascadeDeleteService(
            comment_repository=comment_repo,
            counter_service=FailingCounterService(comment_repository=comment_repo),
            unit_of_work=InMemoryUnitOfWork(store),
        )

        # Act
        with pytest.raises(RuntimeError):
            await cascade_service.delete(child.id)

        # Assert
        assert await comment_repo.find_by_id(child.id) is not None
        assert await comment_repo.find_by_id(grandchild.id) is not None
        assert (await comment_repo.find_by_id(parent.id)).total_sub_comments == 1

    @pytest.mark.asyncio
    async def test_deadline_exceeded_deletes_nothing(self):
        """A traversal that outlives the deadline raises and marks nothing."""
        # Arrange
        store = InMemoryCommentStore()
        comment_repo = SlowCommentRepository(store)
        root = await comment_repo.save(make_comment(text="Root"))
        await comment_repo.save(make_comment(text="Reply", parent_id=root.id))
        cascade_service = CascadeDeleteService(
            comment_repository=comment_repo,
            counter_service=CounterService(comment_repository=comment_repo),
            unit_of_work=InMemoryUnitOfWork(store),
            timeout=0.05,
        )

        # Act
        with pytest.raises(CascadeTimeoutError) as exc_info:
            await cascade_service.delete(root.id)

        # Assert
        assert exc_info.value.comment_id == str(root.id)
        assert await comment_repo.find_by_id(root.id) is not None


class TestCollectSubtree:
    """Tests for collect_subtree method."""

    @pytest.mark.asyncio
    async def test_collects_all_live_descendants(self, unit_env):
        """Collection covers every depth and skips deleted branches."""
        # Arrange
        cascade_service = await unit_env.get(CascadeDeleteService)
        comment_repo = await unit_env.get(CommentRepository)
        root = await comment_repo.save(make_comment(text="Root"))
        level = root
        chain = [root.id]
        for i in range(10):
            level = await comment_repo.save(
                make_comment(text=f"Level {i}", parent_id=level.id)
            )
            chain.append(level.id)
        deleted = await comment_repo.save(
            make_comment(text="Gone", parent_id=root.id, is_deleted=True)
        )

        # Act
        subtree = await cascade_service.collect_subtree(root.id)

        # Assert
        assert subtree == set(chain)
        assert deleted.id not in subtree

    @pytest.mark.asyncio
    async def test_cycle_terminates(self, unit_env):
        """A corrupted parent chain looping back still terminates."""
        # Arrange
        cascade_service = await unit_env.get(CascadeDeleteService)
        comment_repo = await unit_env.get(CommentRepository)
        first_id = new_comment_id()
        second_id = new_comment_id()
        await comment_repo.save(make_comment(comment_id=first_id, parent_id=second_id))
        await comment_repo.save(make_comment(comment_id=second_id, parent_id=first_id))

        # Act
        subtree = await cascade_service.collect_subtree(first_id)

        # Assert
        assert subtree == {first_id, second_id}
