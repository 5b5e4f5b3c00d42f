"""
Contact reference entity.
"""

from pydantic import BaseModel


class Contact(BaseModel):
    """A contact who attends appointments."""
    id: int
    name: str
    email: str

    @property
    def unique_name(self) -> str:
        """Name qualified by ID, for telling apart contacts with the same name."""
        return f"{self.name} ({self.id})"
