"""
Builds the reference caches in dependency order.
"""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from scheduling_core.db.repositories.contact_cache import ContactCache
from scheduling_core.db.repositories.country_cache import CountryCache
from scheduling_core.db.repositories.division_cache import DivisionCache


@dataclass
class ReferenceCaches:
    """Caches that resolve foreign keys for customers and appointments."""
    countries: CountryCache
    divisions: DivisionCache
    contacts: ContactCache


async def load_division_cache(session: AsyncSession) -> DivisionCache:
    """Load countries, then the divisions that refer to them."""
    country_cache = CountryCache(session)
    await country_cache.load_all()
    division_cache = DivisionCache(session, country_cache)
    await division_cache.load_all()
    return division_cache


async def load_contact_cache(session: AsyncSession) -> ContactCache:
    """Load the contact cache."""
    contact_cache = ContactCache(session)
    await contact_cache.load_all()
    return contact_cache


async def build_reference_caches(session: AsyncSession) -> ReferenceCaches:
    """
    Load every reference cache, parents before children.

    Raises:
        DatabaseException: If any load query fails
        EntityNotFoundError: If a division refers to an unknown country
    """
    division_cache = await load_division_cache(session)
    contact_cache = await load_contact_cache(session)
    return ReferenceCaches(
        countries=division_cache.country_cache,
        divisions=division_cache,
        contacts=contact_cache,
    )
