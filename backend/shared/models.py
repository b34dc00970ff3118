"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime, timezone
from enum import Enum
from pydantic import BaseModel, Field


class UserRole(str, Enum):
    """Roles a user can hold."""

    ADMIN = "admin"
    STANDARD = "standard"


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated user in the system.

    This is the projection every protected handler receives after the
    bearer credential has been resolved, whether it was a session token
    or an API key.
    """

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="User's email address, as stored")
    role: str = Field(default=UserRole.STANDARD.value, description="User role")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",  # Ignore extra columns from the users row
    }

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value


class MessageResponse(BaseModel):
    """Success envelope carrying only a human-readable message."""

    success: bool = True
    message: str


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)
