"""
Authentication service implementation.

Resolves bearer credentials for every protected endpoint. A credential
carrying the API-key prefix is only ever checked against api_keys; anything
else is treated as a session token.
"""

import logging
from typing import Optional, TYPE_CHECKING

from shared.models import AuthenticatedUser, UserRole

from .credentials import is_api_key
from .exceptions import (
    InsufficientPermissionsError,
    InvalidCredentialError,
    MissingCredentialError,
)
from .interfaces import IAuthService, ISessionService
from .repository import UserRepository

if TYPE_CHECKING:
    from modules.api_keys.interfaces import IAPIKeyService

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication resolver.

    Dispatches API keys to the api_keys module and session tokens to the
    session service, then loads the owning user's projection.
    """

    def __init__(
        self,
        sessions: ISessionService,
        api_keys: "IAPIKeyService",
        users: UserRepository,
    ):
        self._sessions = sessions
        self._api_keys = api_keys
        self._users = users

    async def authenticate(self, credential: Optional[str]) -> AuthenticatedUser:
        if not credential:
            raise MissingCredentialError()

        if is_api_key(credential):
            return await self._authenticate_api_key(credential)

        return await self._sessions.resolve(credential)

    def authorize(self, user: AuthenticatedUser, required_role: UserRole) -> None:
        if required_role == UserRole.ADMIN and not user.is_admin:
            raise InsufficientPermissionsError(required_role.value, user.role)

    async def _authenticate_api_key(self, key: str) -> AuthenticatedUser:
        user_id = await self._api_keys.authenticate(key)

        user = self._users.get_by_id(user_id)
        if user is None:
            logger.warning(f"API key owner {user_id} no longer exists")
            raise InvalidCredentialError("Invalid or inactive API key")

        return user.to_authenticated()
