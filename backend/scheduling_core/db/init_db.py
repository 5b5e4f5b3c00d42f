"""
Database initialization.
Creates the scheduling schema from the registered tables.
"""

from sqlalchemy.ext.asyncio import AsyncEngine

from scheduling_core.db.base import Base
from scheduling_core.core.logging import get_logger
import scheduling_core.models  # noqa: F401  registers the tables on Base.metadata

logger = get_logger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all scheduling tables that don't exist yet.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database tables initialized", extra={"tables": sorted(Base.metadata.tables)})

