"""
Logged-in user.
"""

from pydantic import BaseModel


class User(BaseModel):
    """A user who has passed login validation."""
    id: int
    name: str
