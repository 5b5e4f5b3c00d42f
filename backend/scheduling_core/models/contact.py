"""
Contacts table.
"""

from sqlalchemy import Table, Column, Integer, String

from scheduling_core.db.base import Base

contacts = Table(
    "contacts",
    Base.metadata,
    Column("Contact_ID", Integer, primary_key=True, autoincrement=True),
    Column("Contact_Name", String(50), nullable=False),
    Column("Email", String(50), nullable=False),
)
