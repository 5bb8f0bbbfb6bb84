"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import Iterator, List, Optional

from sqlalchemy import and_, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from threadline.domain.model import Comment
from threadline.domain.repository import CommentRepository
from threadline.domain.value import CommentId, CursorPosition, SortSpec, new_comment_id
from threadline.persistence.mappers import row_to_comment
from threadline.persistence.tables import comments_table

# Keeps IN (...) lists well under the PostgreSQL bind parameter limit
IN_CLAUSE_CHUNK_SIZE = 1000

_live = comments_table.c.is_deleted.is_(False)


def _chunks(ids: set[CommentId], size: int = IN_CLAUSE_CHUNK_SIZE) -> Iterator[list]:
    ordered = sorted(ids)
    for start in range(0, len(ordered), size):
        yield ordered[start : start + size]


def _parent_filter(parent_id: Optional[CommentId]):
    if parent_id is None:
        return comments_table.c.parent_id.is_(None)
    return comments_table.c.parent_id == parent_id


def _order_by(sort: SortSpec) -> list:
    id_column = comments_table.c.id
    if sort.is_id_order:
        return [id_column.desc() if sort.descending else id_column.asc()]

    column = comments_table.c[sort.field.value]
    return [column.desc() if sort.descending else column.asc(), id_column.desc()]


def _after_cursor(sort: SortSpec, cursor: CursorPosition):
    id_column = comments_table.c.id
    if sort.is_id_order:
        return id_column < cursor.id if sort.descending else id_column > cursor.id
    if cursor.sort_value is None:
        return id_column < cursor.id

    column = comments_table.c[sort.field.value]
    beyond = column < cursor.sort_value if sort.descending else column > cursor.sort_value
    return or_(beyond, and_(column == cursor.sort_value, id_column < cursor.id))


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a live comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id, _live)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_id_including_deleted(
        self, comment_id: CommentId
    ) -> Optional[Comment]:
        """Find a comment by ID, deleted or not."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def exists(self, comment_id: CommentId) -> bool:
        """Check whether a live comment exists."""
        stmt = (
            select(comments_table.c.id)
            .where(comments_table.c.id == comment_id, _live)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def create(self, text: str, parent_id: Optional[CommentId] = None) -> Comment:
        """Insert a comment; timestamps and counters come from column defaults."""
        stmt = (
            comments_table.insert()
            .values(id=new_comment_id(), text=text, parent_id=parent_id)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict())

    async def update_text(self, comment_id: CommentId, text: str) -> Optional[Comment]:
        """Update the text content of a live comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id, _live)
            .values(text=text, updated_at=func.now())
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            # Comment not found or deleted
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def find_children_ids(self, parent_ids: set[CommentId]) -> set[CommentId]:
        """Find ids of live children of any of the given parents."""
        children: set[CommentId] = set()
        for chunk in _chunks(parent_ids):
            stmt = select(comments_table.c.id).where(
                comments_table.c.parent_id.in_(chunk), _live
            )
            result = await self.session.execute(stmt)
            children.update(CommentId(row_id) for row_id in result.scalars())
        return children

    async def mark_deleted(self, comment_ids: set[CommentId], at: datetime) -> int:
        """Soft-delete comments in bulk, skipping those already deleted."""
        marked = 0
        for chunk in _chunks(comment_ids):
            stmt = (
                update(comments_table)
                .where(comments_table.c.id.in_(chunk), _live)
                .values(is_deleted=True, deleted_at=at, updated_at=func.now())
            )
            result = await self.session.execute(stmt)
            marked += result.rowcount or 0
        await self.session.flush()
        return marked

    async def adjust_sub_comment_count(self, comment_id: CommentId, delta: int) -> bool:
        """Atomically add delta to the child counter (never below zero)."""
        counter = comments_table.c.total_sub_comments
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id, _live)
            .where(counter + delta >= 0)
            .values(total_sub_comments=counter + delta, updated_at=func.now())
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return (result.rowcount or 0) > 0

    async def find_page(
        self,
        parent_id: Optional[CommentId],
        sort: SortSpec,
        limit: int,
        offset: int,
    ) -> List[Comment]:
        """Find live children of a parent, offset paginated."""
        stmt = (
            select(comments_table)
            .where(_parent_filter(parent_id), _live)
            .order_by(*_order_by(sort))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_after_cursor(
        self,
        parent_id: Optional[CommentId],
        sort: SortSpec,
        limit: int,
        cursor: Optional[CursorPosition] = None,
    ) -> List[Comment]:
        """Find live children of a parent that follow the cursor position."""
        stmt = select(comments_table).where(_parent_filter(parent_id), _live)

        if cursor is not None:
            stmt = stmt.where(_after_cursor(sort, cursor))

        stmt = stmt.order_by(*_order_by(sort)).limit(limit)
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count(self, parent_id: Optional[CommentId]) -> int:
        """Count live children of a parent."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(_parent_filter(parent_id), _live)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0
