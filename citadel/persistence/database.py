"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from citadel.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg engine described by ``settings.database``.

    Args:
        settings: Application settings

    Returns:
        Engine with a pre-pinged connection pool
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        # Shows up in pg_stat_activity
        connect_args={"server_settings": {"application_name": "citadel"}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the factory for request-scoped sessions.

    Repositories issue Core statements and flush explicitly, so sessions
    neither autoflush nor expire loaded state on commit.

    Args:
        engine: Database engine

    Returns:
        Session factory
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
