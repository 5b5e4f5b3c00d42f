"""
Appointments table.
"""

from sqlalchemy import Table, Column, Integer, String, DateTime, ForeignKey

from scheduling_core.db.base import Base

appointments = Table(
    "appointments",
    Base.metadata,
    Column("Appointment_ID", Integer, primary_key=True, autoincrement=True),
    Column("Title", String(50), nullable=False),
    Column("Description", String(50), nullable=False),
    Column("Location", String(50), nullable=False),
    Column("Type", String(50), nullable=False),
    Column("Start", DateTime, nullable=False, index=True),
    Column("End", DateTime, nullable=False),
    Column("Created_By", String(50), nullable=False),
    Column("Last_Update", DateTime, nullable=False),
    Column("Last_Updated_By", String(50), nullable=False),
    Column("Customer_ID", Integer, ForeignKey("customers.Customer_ID"), nullable=False, index=True),
    Column("User_ID", Integer, ForeignKey("users.User_ID"), nullable=False),
    Column("Contact_ID", Integer, ForeignKey("contacts.Contact_ID"), nullable=False, index=True),
)
