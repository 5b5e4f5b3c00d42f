"""
Country and division reference entities.
"""

from pydantic import BaseModel


class Country(BaseModel):
    """A country, as loaded into the country cache."""
    id: int
    name: str


class Division(BaseModel):
    """A first-level division; owns the country it belongs to."""
    id: int
    name: str
    country: Country

    @property
    def country_id(self) -> int:
        return self.country.id
