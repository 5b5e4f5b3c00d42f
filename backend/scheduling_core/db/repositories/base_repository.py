"""
Base repository class with common CRUD operations.
Repositories handle database access using async SQLAlchemy sessions.
"""

from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, TypeVar

from sqlalchemy import Column, Select, Table, select, insert, update, delete
from sqlalchemy.engine import Row
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from scheduling_core.core.exceptions import DatabaseException, ValidationException
from scheduling_core.core.logging import get_logger
from scheduling_core.schemas.user import User

logger = get_logger(__name__)

EntityType = TypeVar("EntityType")


class BaseRepository(Generic[EntityType]):
    """
    Base repository with common CRUD operations.

    Entities carry an integer ``id`` that is 0 until stored. Subclasses supply
    the row to entity conversion (``_to_entity``) and the entity to column
    values conversion (``_to_values``); everything else is shared.
    """

    def __init__(
        self,
        session: AsyncSession,
        user: Optional[User],
        item_name: str,
        table: Table,
        id_column: Column,
        order_by: Optional[Column] = None,
    ):
        """
        Initialize repository.

        Args:
            session: Async database session of the current unit of work
            user: Logged-in user, recorded as the last updater on save
            item_name: Singular item name used in error messages
            table: Table holding the entities
            id_column: Primary key column
            order_by: Column ordering get_all(), or None for store order
        """
        self.session = session
        self.user = user
        self.item_name = item_name
        self.table = table
        self.id_column = id_column
        self.order_by = order_by

    async def _prepare(self) -> None:
        """Load whatever _to_entity needs; called before rows are converted."""

    def _select_all(self) -> Select:
        """Query returning the rows _to_entity converts."""
        return select(self.table)

    def _to_entity(self, row: Row) -> EntityType:
        raise NotImplementedError

    def _to_values(self, entity: EntityType) -> Dict[str, Any]:
        """Column values to write, excluding the primary key."""
        raise NotImplementedError

    def _audit_values(self, now: datetime) -> Dict[str, Any]:
        """Extra column values stamped on every write."""
        return {}

    def _apply_audit(self, entity: EntityType, now: datetime) -> None:
        """Copy the stamped values onto the entity once the write succeeded."""

    async def _execute(self, statement, error_message: str):
        """Run a statement, wrapping driver errors."""
        try:
            return await self.session.execute(statement)
        except SQLAlchemyError as e:
            logger.error(error_message, extra={"error": str(e)})
            raise DatabaseException(error_message, e) from e

    async def _fetch_all(self, statement, error_message: str) -> List[EntityType]:
        await self._prepare()
        result = await self._execute(statement, error_message)
        return [self._to_entity(row) for row in result.all()]

    async def get_by_id(self, id: int) -> Optional[EntityType]:
        """
        Get a record by ID.

        Args:
            id: Record ID

        Returns:
            Entity or None
        """
        await self._prepare()
        result = await self._execute(
            self._select_all().where(self.id_column == id),
            f"Error getting {self.item_name}",
        )
        row = result.first()
        if row is None:
            return None
        return self._to_entity(row)

    async def get_all(self) -> List[EntityType]:
        """
        List all records.

        Returns:
            Entities, ordered by the repository's order column if it has one
        """
        query = self._select_all()
        if self.order_by is not None:
            query = query.order_by(self.order_by)
        return await self._fetch_all(query, f"Error getting all {self.item_name}s")

    async def save(self, entity: EntityType) -> None:
        """
        Insert a new record or update an existing one.

        An entity with id 0 is inserted and receives the generated id;
        any other id updates that row.

        Raises:
            DatabaseException: If the statement fails or doesn't affect
                exactly one row
        """
        now = datetime.now().replace(microsecond=0)
        values = self._to_values(entity)
        values.update(self._audit_values(now))

        if entity.id == 0:
            result = await self._execute(
                insert(self.table).values(**values),
                f"Error inserting {self.item_name}",
            )
            if result.rowcount != 1:
                raise DatabaseException(f"No {self.item_name} inserted")
            key = result.inserted_primary_key
            if key is None or key[0] is None:
                raise DatabaseException("No ID returned from insert")
            entity.id = key[0]
            logger.debug(f"Inserted {self.item_name}", extra={"id": entity.id})
        else:
            result = await self._execute(
                update(self.table).where(self.id_column == entity.id).values(**values),
                f"Error updating {self.item_name}",
            )
            if result.rowcount != 1:
                # 0 means the row is gone; more than 1 would break the primary key
                raise DatabaseException(f"No {self.item_name} updated")
            logger.debug(f"Updated {self.item_name}", extra={"id": entity.id})

        self._apply_audit(entity, now)

    async def delete(self, entity: EntityType) -> None:
        """
        Delete a record by ID.

        Deleting a record that no longer exists is not an error.
        """
        await self._execute(
            delete(self.table).where(self.id_column == entity.id),
            f"Error deleting {self.item_name}",
        )
        logger.debug(f"Deleted {self.item_name}", extra={"id": entity.id})


class AuditedRepository(BaseRepository[EntityType]):
    """
    Repository for tables with Last_Update and Last_Updated_By columns.

    Saving requires a user to record as the updater; without one ``save``
    raises ValidationException before anything is written.
    """

    def _audit_values(self, now: datetime) -> Dict[str, Any]:
        if self.user is None:
            raise ValidationException(["user not specified"])
        return {
            "Last_Update": now,
            "Last_Updated_By": self.user.name,
        }

    def _apply_audit(self, entity: EntityType, now: datetime) -> None:
        entity.last_update = now
        entity.last_updated_by = self.user.name
