"""
User repository for login validation.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from scheduling_core.core.exceptions import DatabaseException
from scheduling_core.models.user import users
from scheduling_core.schemas.user import User


class UserRepository:
    """Read-only access to the users table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def validate_user(self, username: str, password: str) -> Optional[User]:
        """
        Check a username and password.

        Passwords are stored and compared as plain text, matching the
        existing users table.

        Returns:
            The user, or None if the credentials don't match
        """
        try:
            result = await self.session.execute(
                select(users.c.User_ID)
                .where(users.c.User_name == username)
                .where(users.c.Password == password)
            )
            user_id = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise DatabaseException("Error validating user", e) from e
        if user_id is None:
            return None
        return User(id=user_id, name=username)

    async def get_by_id(self, id: int) -> Optional[User]:
        """Get a user by ID."""
        try:
            result = await self.session.execute(
                select(users.c.User_ID, users.c.User_name).where(users.c.User_ID == id)
            )
            row = result.first()
        except SQLAlchemyError as e:
            raise DatabaseException("Error getting user", e) from e
        if row is None:
            return None
        return User(id=row.User_ID, name=row.User_name)
