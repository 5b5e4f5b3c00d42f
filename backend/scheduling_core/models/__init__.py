"""
Database tables.
Import all tables here to ensure they're registered with Base.metadata.
"""

from scheduling_core.models.country import countries
from scheduling_core.models.division import first_level_divisions
from scheduling_core.models.contact import contacts
from scheduling_core.models.customer import customers
from scheduling_core.models.appointment import appointments
from scheduling_core.models.user import users

__all__ = [
    "countries",
    "first_level_divisions",
    "contacts",
    "customers",
    "appointments",
    "users",
]
