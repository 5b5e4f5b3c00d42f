"""
Base service class.
Services coordinate repositories and caches on behalf of the UI layer.
"""

from abc import ABC

from scheduling_core.db.session import ConnectionProvider


class BaseService(ABC):
    """
    Base for services that run their work through a connection provider.

    Each public operation opens its own unit of work, so a service never holds
    a session between calls.
    """

    def __init__(self, provider: ConnectionProvider):
        self.provider = provider
