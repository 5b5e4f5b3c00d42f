"""
Database session management with async SQLAlchemy 2.0.
Hands out one unit of work (one session, one transaction) at a time.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
)

from scheduling_core.core.config import settings
from scheduling_core.core.exceptions import ConnectionInUseError, DatabaseException
from scheduling_core.core.logging import get_logger

logger = get_logger(__name__)


class ConnectionProvider:
    """
    Supplies the live connection for a unit of work.

    Only one unit may be checked out at a time; trying to open a second one
    while the first is still active raises ConnectionInUseError. Repositories
    created inside a unit share its session and therefore its transaction,
    which is committed when the unit exits normally and rolled back otherwise.
    """

    def __init__(
        self,
        database_url: Optional[str] = None,
        engine: Optional[AsyncEngine] = None,
    ):
        self.database_url = database_url or settings.DATABASE_URL
        self.engine = engine
        self.session_maker: Optional[async_sessionmaker[AsyncSession]] = None
        self._checked_out = False

    @property
    def in_use(self) -> bool:
        """True while a unit of work is open."""
        return self._checked_out

    def create_engine(self) -> AsyncEngine:
        """Create the async SQLAlchemy engine."""
        self.engine = create_async_engine(
            self.database_url,
            echo=settings.DB_ECHO,
            pool_pre_ping=True,  # Verify connections before using
        )
        logger.info("Database engine created", extra={"echo": settings.DB_ECHO})
        return self.engine

    def create_sessionmaker(self) -> async_sessionmaker[AsyncSession]:
        """Create the async sessionmaker, creating the engine if needed."""
        if self.engine is None:
            self.create_engine()

        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info("Sessionmaker created")
        return self.session_maker

    @asynccontextmanager
    async def unit_of_work(self) -> AsyncIterator[AsyncSession]:
        """
        Check out the connection for a related sequence of operations.

        Yields a session and ensures it's committed or rolled back and then
        closed, releasing the checkout on every exit path.
        """
        if self._checked_out:
            raise ConnectionInUseError()
        if self.session_maker is None:
            self.create_sessionmaker()

        self._checked_out = True
        try:
            async with self.session_maker() as session:
                try:
                    yield session
                except BaseException:
                    await session.rollback()
                    raise
                try:
                    await session.commit()
                except SQLAlchemyError as e:
                    await session.rollback()
                    logger.error("Failed to commit unit of work", extra={"error": str(e)})
                    raise DatabaseException("Failed to commit changes", e) from e
        finally:
            self._checked_out = False

    async def close(self) -> None:
        """Close database connections."""
        if self.engine is not None:
            await self.engine.dispose()
            logger.info("Database connections closed")
