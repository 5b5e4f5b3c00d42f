"""
First-level divisions table (states, provinces, regions), one country each.
"""

from sqlalchemy import Table, Column, Integer, String, ForeignKey

from scheduling_core.db.base import Base

first_level_divisions = Table(
    "first_level_divisions",
    Base.metadata,
    Column("Division_ID", Integer, primary_key=True, autoincrement=True),
    Column("Division", String(50), nullable=False),
    Column("COUNTRY_ID", Integer, ForeignKey("countries.Country_ID"), nullable=False, index=True),
)
