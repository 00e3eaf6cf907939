"""Async PostgreSQL engine and per-request sessions."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from resdir.config import Settings

APPLICATION_NAME = "resdir-api"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the directory database.

    A connect attempt that exceeds ``database.connect_timeout_seconds``
    raises ``TimeoutError``, which repositories report as an unavailable
    store.

    Args:
        settings: Application settings with database URL and pool sizes

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        connect_args={
            "timeout": settings.database.connect_timeout_seconds,
            # Shows up in pg_stat_activity
            "server_settings": {"application_name": APPLICATION_NAME},
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory used for request-scoped sessions.

    Sessions never autoflush; repositories flush after each write so the
    replace-all tag savepoint sees its own deletes.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
