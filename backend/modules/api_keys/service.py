"""
API key service implementation.
"""

import logging
import uuid
from typing import Any

from shared.exceptions import PersistenceError
from shared.models import utc_now
from modules.auth.credentials import generate_api_key
from modules.auth.exceptions import InvalidCredentialError

from .exceptions import InvalidKeyNameError
from .interfaces import IAPIKeyService
from .models import APIKeySummary, CreatedAPIKey
from .repository import APIKeyRepository

logger = logging.getLogger(__name__)


class APIKeyService(IAPIKeyService):
    """Creates, lists, revokes and validates long-lived API keys."""

    def __init__(self, repository: APIKeyRepository):
        self._repo = repository

    async def create(self, owner_user_id: str, name: Any) -> CreatedAPIKey:
        if not isinstance(name, str) or not name.strip():
            raise InvalidKeyNameError()

        record = self._repo.create(owner_user_id, generate_api_key(), name)
        logger.info(f"API key {record.id} ({name!r}) created for user {owner_user_id}")

        return CreatedAPIKey(
            key=record.key,
            id=record.id,
            name=record.name,
            created_at=record.created_at,
        )

    async def list(self, owner_user_id: str) -> list[APIKeySummary]:
        return self._repo.list_for_user(owner_user_id)

    async def revoke(self, owner_user_id: str, key_id: str) -> None:
        try:
            uuid.UUID(str(key_id))
        except ValueError:
            # No row can have this id; same outcome as an unknown key
            logger.info(f"Ignoring revoke of malformed API key id by user {owner_user_id}")
            return

        self._repo.deactivate(owner_user_id, key_id)
        logger.info(f"Revoke requested for API key {key_id} by user {owner_user_id}")

    async def authenticate(self, key: str) -> str:
        record = self._repo.get_by_key(key)
        if record is None or not record.is_active:
            raise InvalidCredentialError("Invalid or inactive API key")

        try:
            self._repo.touch(record.id, utc_now())
        except PersistenceError:
            # Usage tracking is best effort
            logger.warning(f"Could not update last_used_at for API key {record.id}")

        return record.user_id
