"""
Pytest configuration and fixtures.
Provides an in-memory database seeded with reference data, a connection
provider over it, and an open unit of work.
"""

from datetime import datetime

import pytest
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from scheduling_core.db.init_db import create_tables
from scheduling_core.db.session import ConnectionProvider
from scheduling_core.models import (
    appointments,
    contacts,
    countries,
    customers,
    first_level_divisions,
    users,
)
from scheduling_core.schemas.appointment import Appointment
from scheduling_core.schemas.customer import Customer
from scheduling_core.schemas.user import User


# Test database URL (in-memory SQLite for testing)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

SEED_TIME = datetime(2024, 1, 1, 9, 0)


@pytest.fixture(scope="function")
async def engine():
    """
    Create a test engine with the schema and reference data loaded.
    Uses in-memory SQLite for fast tests.
    """
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(test_engine)

    async with test_engine.begin() as conn:
        await conn.execute(insert(countries), [
            {"Country_ID": 1, "Country": "U.S"},
            {"Country_ID": 2, "Country": "UK"},
            {"Country_ID": 3, "Country": "Canada"},
        ])
        await conn.execute(insert(first_level_divisions), [
            {"Division_ID": 1, "Division": "Ohio", "COUNTRY_ID": 1},
            {"Division_ID": 2, "Division": "Texas", "COUNTRY_ID": 1},
            {"Division_ID": 101, "Division": "England", "COUNTRY_ID": 2},
            {"Division_ID": 102, "Division": "Wales", "COUNTRY_ID": 2},
            {"Division_ID": 201, "Division": "Ontario", "COUNTRY_ID": 3},
        ])
        await conn.execute(insert(contacts), [
            {"Contact_ID": 1, "Contact_Name": "Anika Costa", "Email": "acoast@company.com"},
            {"Contact_ID": 2, "Contact_Name": "Daniel Garcia", "Email": "dgarcia@company.com"},
            {"Contact_ID": 3, "Contact_Name": "Li Lee", "Email": "llee@company.com"},
        ])
        await conn.execute(insert(users), [
            {"User_ID": 1, "User_name": "test", "Password": "test"},
            {"User_ID": 2, "User_name": "admin", "Password": "admin"},
        ])
        await conn.execute(insert(customers), [
            {
                "Customer_ID": 1,
                "Customer_Name": "Daddy Warbucks",
                "Address": "1919 Boardwalk",
                "Postal_Code": "01291",
                "Phone": "869-908-1875",
                "Created_By": "script",
                "Last_Update": SEED_TIME,
                "Last_Updated_By": "script",
                "Division_ID": 1,
            },
            {
                "Customer_ID": 2,
                "Customer_Name": "Lady McAnderson",
                "Address": "2 Wonder Way",
                "Postal_Code": "AF19B",
                "Phone": "11-445-910-2135",
                "Created_By": "script",
                "Last_Update": SEED_TIME,
                "Last_Updated_By": "script",
                "Division_ID": 101,
            },
        ])

    yield test_engine

    await test_engine.dispose()


@pytest.fixture(scope="function")
def provider(engine):
    """Connection provider over the test engine."""
    return ConnectionProvider(engine=engine)


@pytest.fixture(scope="function")
async def session(provider):
    """An open unit of work; committed when the test finishes."""
    async with provider.unit_of_work() as session:
        yield session


@pytest.fixture
def user():
    return User(id=1, name="test")


@pytest.fixture
def make_appointment():
    """Factory for valid, unsaved appointments; keyword arguments override fields."""
    def _make(**overrides) -> Appointment:
        fields = {
            "title": "Kickoff",
            "description": "Project kickoff",
            "location": "Room 1",
            "type": "Planning Session",
            "start_time": datetime(2024, 1, 15, 10, 0),
            "end_time": datetime(2024, 1, 15, 11, 0),
            "last_updated_by": "test",
            "customer_id": 1,
            "user_id": 1,
            "contact_id": 1,
        }
        fields.update(overrides)
        return Appointment(**fields)
    return _make


@pytest.fixture
def make_customer():
    """Factory for valid, unsaved customers; keyword arguments override fields."""
    def _make(**overrides) -> Customer:
        fields = {
            "name": "Acme Corp",
            "address": "12 Main St",
            "postal_code": "43004",
            "phone": "555-0100",
            "last_updated_by": "test",
            "division_id": 2,
        }
        fields.update(overrides)
        return Customer(**fields)
    return _make


async def insert_appointment(session, start, end, customer_id=1, contact_id=1, type="Planning Session"):
    """Write an appointment row directly, bypassing validation."""
    result = await session.execute(insert(appointments).values(
        Title="Seeded",
        Description="Seeded appointment",
        Location="Room 2",
        Type=type,
        Start=start,
        End=end,
        Created_By="script",
        Last_Update=SEED_TIME,
        Last_Updated_By="script",
        Customer_ID=customer_id,
        User_ID=1,
        Contact_ID=contact_id,
    ))
    return result.inserted_primary_key[0]


@pytest.fixture
def seed_appointment(session):
    """Insert appointment rows through the test session."""
    async def _seed(start, end, **kwargs):
        return await insert_appointment(session, start, end, **kwargs)
    return _seed
