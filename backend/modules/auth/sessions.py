"""
Session lifecycle service.

Bridges a verified email to a logged-in identity and resolves session
tokens back to users. Expired sessions are only cleaned up here, when
someone presents them; there is no background sweep.
"""

import logging
from datetime import timedelta
from typing import Optional

from shared.config import Settings
from shared.logging import redact_email
from shared.models import AuthenticatedUser, utc_now

from .credentials import generate_session_token
from .exceptions import ExpiredCredentialError, InvalidCredentialError, MissingCredentialError
from .interfaces import ISessionService
from .models import LoginResult, UserSummary
from .repository import SessionRepository, UserRepository

logger = logging.getLogger(__name__)


class SessionService(ISessionService):
    """Creates, resolves and revokes session tokens."""

    def __init__(
        self,
        sessions: SessionRepository,
        users: UserRepository,
        settings: Settings,
    ):
        self._sessions = sessions
        self._users = users
        self._ttl = timedelta(days=settings.session_ttl_days)

    async def create_session_for_verified_email(self, email: str) -> LoginResult:
        now = utc_now()
        user = self._users.record_login(email, now)

        token = generate_session_token()
        self._sessions.create(user.id, token, now + self._ttl)

        logger.info(f"Session created for {redact_email(user.email)} (user {user.id})")
        return LoginResult(token=token, user=UserSummary(id=user.id, email=user.email))

    async def resolve(self, token: Optional[str]) -> AuthenticatedUser:
        if not token:
            raise MissingCredentialError()

        session = self._sessions.get_by_token(token)
        if session is None:
            raise InvalidCredentialError("Invalid session")

        if session.expires_at < utc_now():
            self._sessions.delete_by_token(token)
            logger.info(f"Removed expired session for user {session.user_id}")
            raise ExpiredCredentialError()

        user = self._users.get_by_id(session.user_id)
        if user is None:
            logger.warning(f"Session {session.id} points at missing user {session.user_id}")
            raise InvalidCredentialError("Invalid session")

        return user.to_authenticated()

    async def revoke(self, token: str) -> None:
        self._sessions.delete_by_token(token)
