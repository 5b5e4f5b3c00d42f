"""
Aggregate rows returned by the report queries.
"""

from pydantic import BaseModel


class MonthTypeCount(BaseModel):
    """Number of appointments of one type in one calendar month."""
    month: str
    type: str
    count: int


class CountryDivisionCount(BaseModel):
    """Number of customers in one division of one country."""
    country: str
    division: str
    count: int
