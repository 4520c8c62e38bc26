"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from folio.config import Settings
from folio.domain.repository import (
    FollowRepository,
    NotificationRepository,
    ProfileRepository,
    ProjectRepository,
    SnippetRepository,
    StarRepository,
    UserRepository,
)
from folio.persistence.database import create_engine, create_session_factory
from folio.persistence.repository import (
    PostgresFollowRepository,
    PostgresNotificationRepository,
    PostgresProfileRepository,
    PostgresProjectRepository,
    PostgresSnippetRepository,
    PostgresStarRepository,
    PostgresUserRepository,
)
from folio.util.di.base import ProviderBase
from folio.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL.

    The engine and session factory are created once per container (APP
    scope); every request gets its own session and transaction.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
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

        The ledger row, the counter update and the notification of a social
        action are written through this one session, so they commit or roll
        back together.
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
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, session: AsyncSession) -> ProfileRepository:
        """Provide Profile repository."""
        return PostgresProfileRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_project_repository(self, session: AsyncSession) -> ProjectRepository:
        """Provide Project repository."""
        return PostgresProjectRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_snippet_repository(self, session: AsyncSession) -> SnippetRepository:
        """Provide Snippet repository."""
        return PostgresSnippetRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_star_repository(self, session: AsyncSession) -> StarRepository:
        """Provide Star repository."""
        return PostgresStarRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_follow_repository(self, session: AsyncSession) -> FollowRepository:
        """Provide Follow repository."""
        return PostgresFollowRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, session: AsyncSession
    ) -> NotificationRepository:
        """Provide Notification repository."""
        return PostgresNotificationRepository(session)
