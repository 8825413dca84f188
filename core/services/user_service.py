# =============================================================================
# core/services/user_service.py - User Listing Logic
# =============================================================================
# Reads user names from the store for the /users endpoint.
# Separates HTTP concerns from database access.
# =============================================================================

import logging
from typing import Protocol

from app.exceptions import QueryError

logger = logging.getLogger(__name__)


class NameSource(Protocol):
    """Anything that can list user names (the real store or a test fake)."""

    def fetch_names(self) -> list[str]:
        ...


class UserService:
    """
    Service for user read operations.

    Stateless: the store handle is passed in by the caller.
    """

    @staticmethod
    def list_names(store: NameSource) -> list[str]:
        """
        List every user's first name.

        Args:
            store: The shared store handle

        Returns:
            Names in store order; [] when the table is empty

        Raises:
            QueryError: If the query fails or a row can't be read
        """
        try:
            names = store.fetch_names()
        except QueryError as e:
            logger.error(f"Failed to list users: {e.message}")
            raise

        names = list(names or [])
        logger.debug(f"Listed {len(names)} users")
        return names
