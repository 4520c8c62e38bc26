"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from folio.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine.

    Waiting for a pooled connection and individual statements are both
    bounded, so an unreachable database surfaces as a timeout that the
    repositories report as StoreUnavailableError.
    """
    db = settings.database
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
        pool_timeout=db.pool_timeout,
        connect_args={"command_timeout": db.command_timeout},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Models are immutable pydantic copies, nothing to refresh after commit
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
