"""
First-level division cache.
"""

from typing import List

from sqlalchemy import Select, select
from sqlalchemy.engine import Row
from sqlalchemy.ext.asyncio import AsyncSession

from scheduling_core.core.exceptions import EntityNotFoundError
from scheduling_core.db.repositories.country_cache import CountryCache
from scheduling_core.db.repositories.lookup_cache import LookupCache
from scheduling_core.models.division import first_level_divisions
from scheduling_core.schemas.country import Division


class DivisionCache(LookupCache[Division]):
    """
    Cache of all divisions, each holding its country.

    Countries are resolved against an already loaded CountryCache; a division
    naming an unknown country fails the load with EntityNotFoundError.
    """

    item_name = "division"
    items_name = "divisions"

    def __init__(self, session: AsyncSession, country_cache: CountryCache):
        super().__init__(session)
        self.country_cache = country_cache

    def _select(self) -> Select:
        return select(first_level_divisions)

    def _to_entity(self, row: Row) -> Division:
        return Division(
            id=row.Division_ID,
            name=row.Division,
            country=self.country_cache.get_by_id(row.COUNTRY_ID),
        )

    def get_by_name(self, country_name: str, division_name: str) -> Division:
        """
        Find a division by its name and its country's name.

        Raises:
            EntityNotFoundError: If no division matches
        """
        for division in self.id_map.values():
            if division.name == division_name and division.country.name == country_name:
                return division
        raise EntityNotFoundError(self.item_name, f"{division_name}, {country_name}")

    def get_by_country(self, country_id: int) -> List[Division]:
        """Divisions of one country, sorted by name."""
        return sorted(
            (d for d in self.id_map.values() if d.country.id == country_id),
            key=lambda d: d.name,
        )
