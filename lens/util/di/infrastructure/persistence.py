"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from lens.config import Settings
from lens.domain.repository import (
    IdentityRepository,
    SearchEventRepository,
    SessionRepository,
)
from lens.persistence.database import create_engine, create_session_factory
from lens.persistence.repository import (
    PostgresIdentityRepository,
    PostgresSearchEventRepository,
    PostgresSessionRepository,
)
from lens.util.di.base import ProviderBase
from lens.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed on shutdown."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

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
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_identity_repository(self, session: AsyncSession) -> IdentityRepository:
        """Provide Identity repository."""
        return PostgresIdentityRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_session_repository(self, session: AsyncSession) -> SessionRepository:
        """Provide Session repository."""
        return PostgresSessionRepository(session)

    @provide(scope=Scope.APP)
    def get_search_event_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> SearchEventRepository:
        """Provide search event log, independent of the request transaction."""
        return PostgresSearchEventRepository(session_factory)
