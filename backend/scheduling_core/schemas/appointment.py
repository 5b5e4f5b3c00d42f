"""
Appointment entity.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

from pydantic import model_validator

from scheduling_core.core.exceptions import ValidationException
from scheduling_core.schemas.validation import (
    EditableEntity,
    require_datetime,
    require_positive,
    trim_required,
)
from scheduling_core.services.business_hours import business_hours_errors
from scheduling_core.utils.time_format import format_date_time

if TYPE_CHECKING:
    from scheduling_core.db.repositories.contact_cache import ContactCache


class Appointment(EditableEntity):
    """
    An appointment between a customer and a contact, booked by a user.

    Times are naive local datetimes and the interval is half-open:
    an appointment occupies [start_time, end_time). ``contact_name`` is a
    snapshot of the contact's name, refreshed only by ``apply_snapshot``.
    """
    title: str
    description: str
    location: str
    type: str
    start_time: datetime
    end_time: datetime
    created_by: str
    last_update: Optional[datetime] = None
    last_updated_by: str
    customer_id: int
    user_id: int
    contact_id: int

    # Snapshot, not live
    contact_name: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def validate_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        errors = []
        trim_required(data, [
            ("title", "title is empty"),
            ("description", "description is empty"),
            ("type", "type is empty"),
            ("location", "location is empty"),
        ], errors)
        require_positive(data, "contact_id", "contact ID not specified", errors)
        require_positive(data, "customer_id", "customer ID not specified", errors)

        start_time = require_datetime(data, "start_time", "no starting date/time", errors)
        end_time = require_datetime(data, "end_time", "no ending date/time", errors)
        if start_time is not None and end_time is not None:
            if end_time <= start_time:
                errors.append("end time <= start time")
            else:
                errors.extend(business_hours_errors(start_time, end_time))

        trim_required(data, [("last_updated_by", "username not specified")], errors)
        require_positive(data, "user_id", "user ID not specified", errors)
        if errors:
            raise ValidationException(errors)
        if not (data.get("created_by") or "").strip():
            data["created_by"] = data["last_updated_by"]
        return data

    @property
    def start_time_string(self) -> str:
        return format_date_time(self.start_time)

    @property
    def end_time_string(self) -> str:
        return format_date_time(self.end_time)

    def apply_snapshot(self, cache: "ContactCache") -> None:
        self.contact_name = cache.get_by_id(self.contact_id).name
