"""
Users table.
"""

from sqlalchemy import Table, Column, Integer, String

from scheduling_core.db.base import Base

users = Table(
    "users",
    Base.metadata,
    Column("User_ID", Integer, primary_key=True, autoincrement=True),
    Column("User_name", String(50), nullable=False, unique=True),
    Column("Password", String(50), nullable=False),
)
