"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.

Messages are deliberately generic: they never say whether an email is
registered or whether a credential exists.
"""

from typing import Optional

from shared.exceptions import AuthenticationError, AuthorizationError, ValidationError


class InvalidCredentialError(AuthenticationError):
    """Raised when a code, session token or API key doesn't match anything usable."""

    def __init__(self, message: str = "Invalid authentication credentials"):
        super().__init__(message, code="INVALID_CREDENTIAL")


class ExpiredCredentialError(AuthenticationError):
    """Raised when a session token has expired."""

    def __init__(self, message: str = "Session expired"):
        super().__init__(message, code="EXPIRED_CREDENTIAL")


class MissingCredentialError(AuthenticationError):
    """Raised when no bearer credential is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_CREDENTIAL")


class InsufficientPermissionsError(AuthorizationError):
    """Raised when user lacks required permissions."""

    def __init__(self, required_role: str, user_role: Optional[str] = None):
        super().__init__(
            "Admin access required" if required_role == "admin" else "Insufficient permissions",
            code="INSUFFICIENT_PERMISSIONS",
            details={"required_role": required_role, "user_role": user_role},
        )


class InvalidEmailError(ValidationError):
    """Raised when an email address is missing or malformed."""

    def __init__(self):
        super().__init__(
            "Please provide a valid email address",
            code="INVALID_EMAIL",
        )


class MissingFieldError(ValidationError):
    """Raised when required request fields are missing."""

    def __init__(self, message: str, fields: list[str]):
        super().__init__(
            message,
            code="MISSING_FIELDS",
            details={"fields": fields},
        )
