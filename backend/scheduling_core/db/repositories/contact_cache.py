"""
Contact cache.
"""

from sqlalchemy import Select, select
from sqlalchemy.engine import Row

from scheduling_core.db.repositories.lookup_cache import LookupCache
from scheduling_core.models.contact import contacts
from scheduling_core.schemas.contact import Contact


class ContactCache(LookupCache[Contact]):
    """Cache of all contacts; has no dependencies."""

    item_name = "contact"
    items_name = "contacts"

    def _select(self) -> Select:
        return select(contacts)

    def _to_entity(self, row: Row) -> Contact:
        return Contact(id=row.Contact_ID, name=row.Contact_Name, email=row.Email)
