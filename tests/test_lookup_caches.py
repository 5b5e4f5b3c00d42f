"""
Reference cache tests: eager loading, explicit misses, dependency order.
"""

import pytest
from sqlalchemy import insert, text

from scheduling_core.core.exceptions import DatabaseException, EntityNotFoundError
from scheduling_core.db.repositories.contact_cache import ContactCache
from scheduling_core.db.repositories.country_cache import CountryCache
from scheduling_core.db.repositories.division_cache import DivisionCache
from scheduling_core.db.repositories.reference_caches import build_reference_caches
from scheduling_core.models import contacts, first_level_divisions


@pytest.mark.asyncio
async def test_country_cache_loads_every_row(session):
    cache = CountryCache(session)
    loaded = await cache.load_all()

    assert set(loaded) == {1, 2, 3}
    assert cache.get_by_id(2).name == "UK"
    assert len(cache) == 3
    assert sorted(c.name for c in cache.get_all()) == ["Canada", "U.S", "UK"]


@pytest.mark.asyncio
async def test_unknown_id_is_an_error_not_a_default(session):
    cache = CountryCache(session)
    await cache.load_all()

    assert 99 not in cache
    with pytest.raises(EntityNotFoundError) as exc_info:
        cache.get_by_id(99)
    assert exc_info.value.id == 99


@pytest.mark.asyncio
async def test_divisions_resolve_their_country(session):
    country_cache = CountryCache(session)
    await country_cache.load_all()
    division_cache = DivisionCache(session, country_cache)
    await division_cache.load_all()

    england = division_cache.get_by_id(101)
    assert england.country.name == "UK"
    assert england.country is country_cache.get_by_id(2)
    assert division_cache.get_by_name("U.S", "Texas").id == 2
    assert [d.name for d in division_cache.get_by_country(2)] == ["England", "Wales"]


@pytest.mark.asyncio
async def test_division_get_by_name_miss_raises(session):
    caches = await build_reference_caches(session)

    with pytest.raises(EntityNotFoundError):
        caches.divisions.get_by_name("UK", "Texas")


@pytest.mark.asyncio
async def test_division_with_unknown_country_fails_load(session):
    await session.execute(insert(first_level_divisions).values(
        Division_ID=900, Division="Atlantis", COUNTRY_ID=42,
    ))
    country_cache = CountryCache(session)
    await country_cache.load_all()

    with pytest.raises(EntityNotFoundError):
        await DivisionCache(session, country_cache).load_all()


@pytest.mark.asyncio
async def test_build_reference_caches_loads_all(session):
    caches = await build_reference_caches(session)

    assert caches.divisions.country_cache is caches.countries
    assert len(caches.divisions) == 5
    assert caches.contacts.get_by_id(3).email == "llee@company.com"


@pytest.mark.asyncio
async def test_cache_is_a_snapshot(session):
    cache = ContactCache(session)
    await cache.load_all()
    await session.execute(insert(contacts).values(
        Contact_ID=4, Contact_Name="New Person", Email="new@company.com",
    ))

    assert 4 not in cache
    await cache.load_all()
    assert cache.get_by_id(4).name == "New Person"


@pytest.mark.asyncio
async def test_query_failure_wrapped(engine, provider):
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE contacts"))

    with pytest.raises(DatabaseException) as exc_info:
        async with provider.unit_of_work() as session:
            await ContactCache(session).load_all()

    assert exc_info.value.message == "Error preparing contacts"
    assert exc_info.value.cause is not None
