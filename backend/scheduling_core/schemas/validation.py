"""
Helpers shared by the editable entities for collecting validation problems.

Each entity checks every field before raising, so a caller gets the whole list
of problems in one ValidationException rather than one at a time.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple
from zoneinfo import ZoneInfo

from pydantic import BaseModel, TypeAdapter, ValidationError

from scheduling_core.core.config import settings
from scheduling_core.core.exceptions import ValidationException


def trim_required(
    data: Dict[str, Any],
    fields: List[Tuple[str, str]],
    errors: List[str],
) -> None:
    """Trim each text field in place, noting the ones left empty or not text."""
    for field, message in fields:
        value = data.get(field)
        if value is None:
            value = ""
        if not isinstance(value, str):
            errors.append(f"{field.replace('_', ' ')} is not text")
            continue
        value = value.strip()
        data[field] = value
        if not value:
            errors.append(message)


_datetime_adapter = TypeAdapter(datetime)


def require_datetime(
    data: Dict[str, Any],
    field: str,
    message: str,
    errors: List[str],
) -> Optional[datetime]:
    """
    Convert a date/time field in place, noting one that is missing or unreadable.

    Strings are parsed the way pydantic parses them; zone-aware values are
    converted to naive LOCAL_TIMEZONE time.
    """
    value = data.get(field)
    if value is None:
        errors.append(message)
        return None
    try:
        value = _datetime_adapter.validate_python(value)
    except ValidationError:
        errors.append(message)
        return None
    if value.tzinfo is not None:
        value = value.astimezone(ZoneInfo(settings.LOCAL_TIMEZONE)).replace(tzinfo=None)
    data[field] = value
    return value


def require_positive(data: Dict[str, Any], field: str, message: str, errors: List[str]) -> None:
    """Note a reference id that is missing, zero or negative."""
    value = data.get(field)
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        errors.append(message)


class EditableEntity(BaseModel):
    """
    Base for entities a user creates and modifies.

    ``id`` is 0 until the repository stores the entity and assigns the
    generated key. Construction validates; rows read back from the store are
    built with ``model_construct`` and are trusted as-is.
    """
    id: int = 0

    def set(self, updated_by: str, cache: Optional[Any] = None, **changes: Any) -> None:
        """
        Change modifiable fields all at once.

        The merged values are validated on a scratch copy first; this object is
        only touched when every value is acceptable.

        Args:
            updated_by: Name of the user making the change
            cache: Optional cache used to re-snapshot derived display fields
            **changes: New field values

        Raises:
            ValidationException: If any value is invalid; nothing is changed
        """
        if "id" in changes:
            raise ValidationException(["ID cannot be changed"])
        values = self.model_dump()
        values.update(changes)
        values["last_updated_by"] = updated_by
        candidate = type(self).model_validate(values)
        for name in type(self).model_fields:
            setattr(self, name, getattr(candidate, name))
        if cache is not None:
            self.apply_snapshot(cache)

    def apply_snapshot(self, cache: Any) -> None:
        """Copy derived display values from a cache."""
        raise NotImplementedError
