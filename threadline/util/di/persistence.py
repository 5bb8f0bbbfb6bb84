"""Persistence providers: PostgreSQL engine, request session, repositories."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from threadline.config import DatabaseSettings, Settings
from threadline.domain.repository import CommentRepository, UnitOfWork
from threadline.persistence.database import create_engine, create_session_factory
from threadline.persistence.repository import PostgresCommentRepository
from threadline.persistence.unit_of_work import SqlAlchemyUnitOfWork
from threadline.util.di.base import ProviderBase
from threadline.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component: repositories and unit of work."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL persistence. Sessions commit at the end of each request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(
        self, database: DatabaseSettings, settings: Settings
    ) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide unit of work on the request session."""
        return SqlAlchemyUnitOfWork(session)
