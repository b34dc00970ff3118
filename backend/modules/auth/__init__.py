"""
Authentication module.

Handles passwordless login (email OTP), session tokens and resolution of
bearer credentials to users.

Public API:
- IAuthService: Resolve a bearer credential (session token or API key)
- IOTPService / ISessionService: Login code and session lifecycle
- User, LoginResult: Auth data models
- Auth exceptions: InvalidCredentialError, ExpiredCredentialError, etc.
"""

from .interfaces import IAuthService, IOTPService, ISessionService
from .models import User, UserSummary, LoginResult
from .credentials import API_KEY_PREFIX, is_api_key, is_valid_email
from .exceptions import (
    InvalidCredentialError,
    ExpiredCredentialError,
    MissingCredentialError,
    InsufficientPermissionsError,
    InvalidEmailError,
    MissingFieldError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "IOTPService",
    "ISessionService",
    # Models
    "User",
    "UserSummary",
    "LoginResult",
    # Credentials
    "API_KEY_PREFIX",
    "is_api_key",
    "is_valid_email",
    # Exceptions
    "InvalidCredentialError",
    "ExpiredCredentialError",
    "MissingCredentialError",
    "InsufficientPermissionsError",
    "InvalidEmailError",
    "MissingFieldError",
]
