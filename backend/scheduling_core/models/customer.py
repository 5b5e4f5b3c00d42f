"""
Customers table.
"""

from sqlalchemy import Table, Column, Integer, String, DateTime, ForeignKey

from scheduling_core.db.base import Base

# No ON DELETE CASCADE: CustomerRepository removes dependent appointments itself.
customers = Table(
    "customers",
    Base.metadata,
    Column("Customer_ID", Integer, primary_key=True, autoincrement=True),
    Column("Customer_Name", String(50), nullable=False),
    Column("Address", String(100), nullable=False),
    Column("Postal_Code", String(50), nullable=False),
    Column("Phone", String(50), nullable=False),
    Column("Created_By", String(50), nullable=False),
    Column("Last_Update", DateTime, nullable=False),
    Column("Last_Updated_By", String(50), nullable=False),
    Column("Division_ID", Integer, ForeignKey("first_level_divisions.Division_ID"), nullable=False, index=True),
)
