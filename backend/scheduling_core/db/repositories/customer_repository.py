"""
Customer repository for database operations.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession

from scheduling_core.core.logging import get_logger
from scheduling_core.db.repositories.base_repository import AuditedRepository
from scheduling_core.db.repositories.division_cache import DivisionCache
from scheduling_core.db.repositories.reference_caches import load_division_cache
from scheduling_core.models.appointment import appointments
from scheduling_core.models.country import countries
from scheduling_core.models.customer import customers
from scheduling_core.models.division import first_level_divisions
from scheduling_core.schemas.customer import Customer
from scheduling_core.schemas.report import CountryDivisionCount
from scheduling_core.schemas.user import User

logger = get_logger(__name__)


class CustomerRepository(AuditedRepository[Customer]):
    """Repository for customer operations."""

    def __init__(
        self,
        session: AsyncSession,
        user: User,
        division_cache: Optional[DivisionCache] = None,
    ):
        super().__init__(
            session,
            user,
            "customer",
            customers,
            customers.c.Customer_ID,
        )
        self.division_cache = division_cache

    async def _prepare(self) -> None:
        if self.division_cache is None:
            self.division_cache = await load_division_cache(self.session)

    def _to_entity(self, row: Row) -> Customer:
        customer = Customer.model_construct(
            id=row.Customer_ID,
            name=row.Customer_Name,
            address=row.Address,
            postal_code=row.Postal_Code,
            phone=row.Phone,
            created_by=row.Created_By,
            last_update=row.Last_Update,
            last_updated_by=row.Last_Updated_By,
            division_id=row.Division_ID,
        )
        customer.apply_snapshot(self.division_cache)
        return customer

    def _to_values(self, customer: Customer) -> Dict[str, Any]:
        return {
            "Customer_Name": customer.name,
            "Address": customer.address,
            "Postal_Code": customer.postal_code,
            "Phone": customer.phone,
            "Created_By": customer.created_by,
            "Division_ID": customer.division_id,
        }

    async def delete(self, customer: Customer) -> None:
        """
        Delete a customer together with all of its appointments.

        The store doesn't cascade, so appointments go first. Both deletes run
        in the unit of work's transaction: if the customer delete fails, the
        unit rolls back and the appointments are kept.
        """
        result = await self._execute(
            delete(appointments).where(appointments.c.Customer_ID == customer.id),
            f"Error deleting {self.item_name} appointments",
        )
        logger.debug(
            "Deleted customer appointments",
            extra={"customer_id": customer.id, "count": result.rowcount},
        )
        await super().delete(customer)

    async def get_country_division_counts(self) -> List[CountryDivisionCount]:
        """Count customers per division, ordered by country and then division."""
        query = (
            select(
                countries.c.Country,
                first_level_divisions.c.Division,
                func.count().label("Count"),
            )
            .select_from(customers)
            .join(
                first_level_divisions,
                customers.c.Division_ID == first_level_divisions.c.Division_ID,
            )
            .join(
                countries,
                first_level_divisions.c.COUNTRY_ID == countries.c.Country_ID,
            )
            .group_by(countries.c.Country, first_level_divisions.c.Division)
            .order_by(countries.c.Country, first_level_divisions.c.Division)
        )
        result = await self._execute(query, "Error getting country division counts")
        return [
            CountryDivisionCount(country=row.Country, division=row.Division, count=row.Count)
            for row in result.all()
        ]
