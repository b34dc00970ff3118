"""
API key module interface.

The auth module depends on IAPIKeyService to validate prefixed bearer
credentials; the admin routes and CLI use it to manage keys.
"""

from typing import Any, Protocol, runtime_checkable

from .models import APIKeySummary, CreatedAPIKey


@runtime_checkable
class IAPIKeyService(Protocol):
    """Interface for API key lifecycle operations."""

    async def create(self, owner_user_id: str, name: Any) -> CreatedAPIKey:
        """
        Create a key for a user.

        The caller must already have checked that the user is an admin.

        Raises:
            ValidationError: If name is not a non-empty string
            PersistenceError: If the key could not be stored
        """
        ...

    async def list(self, owner_user_id: str) -> list[APIKeySummary]:
        """List a user's keys, newest first, without key material."""
        ...

    async def revoke(self, owner_user_id: str, key_id: str) -> None:
        """
        Deactivate one of the user's keys.

        Does nothing if the key doesn't exist or belongs to someone else,
        and never says which.
        """
        ...

    async def authenticate(self, key: str) -> str:
        """
        Validate a raw key and record its use.

        Returns:
            The owning user's ID

        Raises:
            InvalidCredentialError: If the key is unknown or inactive
        """
        ...
