"""Async engine and session factory for the StackIt database."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from stackit.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Pooled asyncpg engine; echoes SQL when debugging."""
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions for one request each.

    Repositories flush explicitly (they need generated rowcounts and
    row locks in order) and entities stay readable after commit.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
