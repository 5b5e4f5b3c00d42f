"""
Countries table.
"""

from sqlalchemy import Table, Column, Integer, String

from scheduling_core.db.base import Base

countries = Table(
    "countries",
    Base.metadata,
    Column("Country_ID", Integer, primary_key=True, autoincrement=True),
    Column("Country", String(50), nullable=False),
)
