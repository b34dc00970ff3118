"""
Authentication module interfaces.

Other modules and the API layer should depend on these protocols, not the
concrete implementations. This enables testing with mocks and lets the HTTP
routes and the admin CLI share one implementation.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser, UserRole

from .models import LoginResult


@runtime_checkable
class IOTPService(Protocol):
    """Interface for one-time login codes."""

    async def issue(self, email: Optional[str]) -> None:
        """
        Issue a login code for an email address and send it.

        Args:
            email: Address to send the code to

        Raises:
            ValidationError: If the email is missing or malformed
            PersistenceError: If the code could not be stored
            DeliveryError: If the email could not be sent
        """
        ...

    async def verify(self, email: Optional[str], code: Optional[str]) -> str:
        """
        Consume a login code.

        Args:
            email: Address the code was sent to
            code: The 6-digit code

        Returns:
            The email the code was issued for

        Raises:
            ValidationError: If either argument is missing
            InvalidCredentialError: If no unused, unexpired code matches
        """
        ...


@runtime_checkable
class ISessionService(Protocol):
    """Interface for session token lifecycle."""

    async def create_session_for_verified_email(self, email: str) -> LoginResult:
        """
        Log in the owner of a verified email, creating the user if needed.

        Returns:
            LoginResult with the new session token and the user's (id, email)

        Raises:
            PersistenceError: On any datastore failure
        """
        ...

    async def resolve(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Resolve a session token to its user.

        Raises:
            MissingCredentialError: If no token was given
            InvalidCredentialError: If the token is unknown
            ExpiredCredentialError: If the session expired (it is deleted)
        """
        ...

    async def revoke(self, token: str) -> None:
        """Delete the session for a token. Succeeds even if none exists."""
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for resolving bearer credentials.

    This is the single entry point every protected handler goes through.
    """

    async def authenticate(self, credential: Optional[str]) -> AuthenticatedUser:
        """
        Resolve a bearer credential (session token or API key) to a user.

        Raises:
            MissingCredentialError: If no credential was given
            InvalidCredentialError: If the credential is unknown or inactive
            ExpiredCredentialError: If a session token has expired
        """
        ...

    def authorize(self, user: AuthenticatedUser, required_role: UserRole) -> None:
        """
        Check that a resolved user holds a role.

        Raises:
            InsufficientPermissionsError: If the user's role doesn't satisfy it
        """
        ...
