"""
Exceptions raised by the data access layer and the entity classes.
"""

from typing import Any, List, Optional


class AppException(Exception):
    """Base application exception."""
    def __init__(self, message: str, details: Any = None):
        self.message = message
        self.details = details
        super().__init__(self.message)


class DatabaseException(AppException):
    """
    Failure talking to the backing store.

    The message is a short description of the attempted operation that is safe
    to show a user; the driver error is kept in ``cause`` for diagnostics.
    """
    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message, details=str(cause) if cause else None)


class ValidationException(AppException):
    """
    One or more invalid values supplied for an entity.

    Not a ValueError subclass: pydantic wraps ValueErrors raised in validators,
    and this exception has to reach the caller as-is.
    """
    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors), details=self.errors)


class EntityNotFoundError(AppException):
    """Lookup of an id that referential integrity says must exist."""
    def __init__(self, item_name: str, id: Any):
        self.item_name = item_name
        self.id = id
        super().__init__(f"No {item_name} with ID {id}")


class ConnectionInUseError(AppException, RuntimeError):
    """A second unit of work was opened while one is still checked out."""
    def __init__(self, message: str = "Attempted to open multiple connections"):
        super().__init__(message)
