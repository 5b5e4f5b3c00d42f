"""
SQLAlchemy declarative base; its metadata holds every scheduling table.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class whose metadata collects the schema tables."""
    pass
