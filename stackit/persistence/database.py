"""Database engine and session factory.

One ``AsyncSession`` spans one request; the DI provider commits it when the
request succeeds and rolls it back otherwise.
"""

from typing import Optional

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from stackit.adapter.realtime import DeferredPublisher
from stackit.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def end_session(
    session: AsyncSession,
    pushes: DeferredPublisher,
    error: Optional[BaseException] = None,
) -> None:
    """Finish the request's unit of work.

    Commits unless the request failed. Queued pushes survive only a
    successful commit; they are sent when ``pushes`` itself is closed,
    which happens after the session is finished.

    Raises:
        Exception: Whatever the commit raised
    """
    if error is not None:
        logfire.warn("Session rollback", error=str(error))
        await session.rollback()
        pushes.discard()
        return

    try:
        await session.commit()
    except Exception as e:
        logfire.error("Session commit failed", error=str(e))
        pushes.discard()
        await session.rollback()
        raise
