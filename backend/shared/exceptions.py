"""
Base exception classes for the DabotCentral backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to one HTTP status code, so picking the
right base is what decides the response a caller sees.
"""

from typing import Optional, Any


class DabotError(Exception):
    """
    Base exception for all DabotCentral errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logging and debugging."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(DabotError):
    """Resource not found."""

    pass


class ValidationError(DabotError):
    """Input validation failed."""

    pass


class AuthenticationError(DabotError):
    """Authentication failed (invalid, expired or missing credentials)."""

    pass


class AuthorizationError(DabotError):
    """Authorization failed (insufficient permissions)."""

    pass


class ExternalServiceError(DabotError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class PersistenceError(ExternalServiceError):
    """A datastore read or write failed."""

    def __init__(
        self,
        operation: str,
        message: str = "Database operation failed",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            service="supabase",
            code="PERSISTENCE_ERROR",
            details={**(details or {}), "operation": operation},
        )
        self.operation = operation


class DeliveryError(ExternalServiceError):
    """A notification could not be handed to the delivery provider."""

    def __init__(
        self,
        message: str = "Failed to send email",
        service: str = "resend",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message,
            service=service,
            code="DELIVERY_ERROR",
            details=details,
        )
