"""
Base class for the read-only reference caches.

A cache loads every row of its table once and then answers lookups from
memory. It is a snapshot: rows written after loading are not seen until the
cache is rebuilt.
"""

from typing import Dict, Generic, Iterator, List, TypeVar

from sqlalchemy import Select
from sqlalchemy.engine import Row
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from scheduling_core.core.exceptions import DatabaseException, EntityNotFoundError
from scheduling_core.core.logging import get_logger

logger = get_logger(__name__)

EntityType = TypeVar("EntityType")


class LookupCache(Generic[EntityType]):
    """In-memory map from id to entity for one reference table."""

    item_name: str = "item"
    items_name: str = "items"

    def __init__(self, session: AsyncSession):
        self.session = session
        self.id_map: Dict[int, EntityType] = {}

    def _select(self) -> Select:
        raise NotImplementedError

    def _to_entity(self, row: Row) -> EntityType:
        raise NotImplementedError

    async def load_all(self) -> Dict[int, EntityType]:
        """
        Load every row, replacing anything loaded before.

        Returns:
            Mapping of id to entity

        Raises:
            DatabaseException: If the query fails
        """
        try:
            result = await self.session.execute(self._select())
            rows = result.all()
        except SQLAlchemyError as e:
            logger.error(f"Error preparing {self.items_name}", extra={"error": str(e)})
            raise DatabaseException(f"Error preparing {self.items_name}", e) from e

        id_map = {}
        for row in rows:
            entity = self._to_entity(row)
            id_map[entity.id] = entity
        self.id_map = id_map
        logger.info(f"Loaded {self.items_name} cache", extra={"count": len(id_map)})
        return self.id_map

    def get_by_id(self, id: int) -> EntityType:
        """
        Get a cached entity.

        Raises:
            EntityNotFoundError: If no entity has this id
        """
        try:
            return self.id_map[id]
        except KeyError:
            raise EntityNotFoundError(self.item_name, id) from None

    def get_all(self) -> List[EntityType]:
        """All cached entities, in no particular order."""
        return list(self.id_map.values())

    def __contains__(self, id: object) -> bool:
        return id in self.id_map

    def __len__(self) -> int:
        return len(self.id_map)

    def __iter__(self) -> Iterator[EntityType]:
        return iter(self.id_map.values())
