"""
Login session: the logged-in user and the reference caches loaded for them.
"""

from typing import Optional

from scheduling_core.core.logging import get_logger
from scheduling_core.db.repositories.contact_cache import ContactCache
from scheduling_core.db.repositories.country_cache import CountryCache
from scheduling_core.db.repositories.division_cache import DivisionCache
from scheduling_core.db.repositories.reference_caches import build_reference_caches
from scheduling_core.db.repositories.user_repository import UserRepository
from scheduling_core.db.session import ConnectionProvider
from scheduling_core.schemas.user import User
from scheduling_core.services.base_service import BaseService
from scheduling_core.services.login_log import append_login

logger = get_logger(__name__)


class SessionService(BaseService):
    """
    Tracks who is logged in and holds the caches built at login.

    The caches are a snapshot for the session; call ``reload_caches`` after
    writes that add countries, divisions or contacts.
    """

    def __init__(self, provider: ConnectionProvider, login_log_path: Optional[str] = None):
        super().__init__(provider)
        self.login_log_path = login_log_path
        self.user: Optional[User] = None
        self.countries: Optional[CountryCache] = None
        self.divisions: Optional[DivisionCache] = None
        self.contacts: Optional[ContactCache] = None

    @property
    def logged_in(self) -> bool:
        return self.user is not None

    async def login(self, username: str, password: str) -> bool:
        """
        Validate credentials, record the attempt, and load the caches.

        Returns:
            True if the user is now logged in

        Raises:
            DatabaseException: If validation or cache loading fails
        """
        username = username.strip()
        async with self.provider.unit_of_work() as session:
            user = await UserRepository(session).validate_user(username, password)
            if user is not None:
                caches = await build_reference_caches(session)

        append_login(username, user is not None, path=self.login_log_path)
        if user is None:
            logger.warning("Login failed", extra={"username": username})
            return False

        self.user = user
        self.countries = caches.countries
        self.divisions = caches.divisions
        self.contacts = caches.contacts
        logger.info("Login succeeded", extra={"username": username, "user_id": user.id})
        return True

    async def reload_caches(self) -> None:
        """Discard and rebuild the reference caches."""
        async with self.provider.unit_of_work() as session:
            caches = await build_reference_caches(session)
        self.countries = caches.countries
        self.divisions = caches.divisions
        self.contacts = caches.contacts

    def logout(self) -> None:
        """Forget the user and the session's caches."""
        if self.user is not None:
            logger.info("Logged out", extra={"username": self.user.name})
        self.user = None
        self.countries = None
        self.divisions = None
        self.contacts = None
