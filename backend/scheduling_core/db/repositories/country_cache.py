"""
Country cache.
"""

from sqlalchemy import Select, select
from sqlalchemy.engine import Row

from scheduling_core.db.repositories.lookup_cache import LookupCache
from scheduling_core.models.country import countries
from scheduling_core.schemas.country import Country


class CountryCache(LookupCache[Country]):
    """Cache of all countries; has no dependencies."""

    item_name = "country"
    items_name = "countries"

    def _select(self) -> Select:
        return select(countries.c.Country_ID, countries.c.Country)

    def _to_entity(self, row: Row) -> Country:
        return Country(id=row.Country_ID, name=row.Country)
