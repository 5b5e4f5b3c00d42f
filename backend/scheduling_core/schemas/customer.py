"""
Customer entity.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

from pydantic import model_validator

from scheduling_core.core.exceptions import ValidationException
from scheduling_core.schemas.validation import EditableEntity, require_positive, trim_required

if TYPE_CHECKING:
    from scheduling_core.db.repositories.division_cache import DivisionCache


class Customer(EditableEntity):
    """
    A customer located in a first-level division.

    ``division_name`` and ``country_name`` are a snapshot taken from the
    division cache when the customer was built; they do not follow later
    changes to the division and are refreshed only by ``apply_snapshot``.
    """
    name: str
    address: str
    postal_code: str
    phone: str
    created_by: str
    last_update: Optional[datetime] = None
    last_updated_by: str
    division_id: int

    # Snapshot, not live
    division_name: Optional[str] = None
    country_name: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def validate_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        errors = []
        trim_required(data, [
            ("name", "name is empty"),
            ("address", "address is empty"),
            ("postal_code", "postal code is empty"),
            ("phone", "phone is empty"),
            ("last_updated_by", "user not specified"),
        ], errors)
        require_positive(data, "division_id", "division not specified", errors)
        if errors:
            raise ValidationException(errors)
        if not (data.get("created_by") or "").strip():
            data["created_by"] = data["last_updated_by"]
        return data

    @property
    def unique_name(self) -> str:
        """Name qualified by ID, for telling apart customers with the same name."""
        return f"{self.name} ({self.id})"

    def apply_snapshot(self, cache: "DivisionCache") -> None:
        division = cache.get_by_id(self.division_id)
        self.division_name = division.name
        self.country_name = division.country.name
