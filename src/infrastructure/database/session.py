"""Database session management."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from core.config import settings
from core.exceptions import UnexpectedError

logger = structlog.get_logger()

# Create async engine
engine = create_async_engine(
    settings.async_database_url,
    echo=settings.debug,
    pool_pre_ping=True,
)

# Create async session factory
async_session_factory = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


@asynccontextmanager
async def transaction(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Lease a session and run the block inside one transaction.

    Commits when the block finishes, rolls back on any exception. Driver,
    SQL and connection errors surface as ``UnexpectedError``; application
    errors raised inside the block propagate unchanged. The session goes
    back to the pool either way.
    """
    async with session_factory() as session:
        try:
            async with session.begin():
                yield session
        except (SQLAlchemyError, OSError) as e:
            logger.error(
                "transaction_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise UnexpectedError(str(e)) from e
