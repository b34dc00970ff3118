"""
Authentication module data models.

Row models mirror the `users`, `otp_codes` and `sessions` tables.
Request/response models define the JSON bodies of the /auth routes.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import AuthenticatedUser, UserRole


# =============================================================================
# Rows
# =============================================================================


class User(BaseModel):
    """A row of the users table."""

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Email address, case preserved")
    role: UserRole = Field(default=UserRole.STANDARD)
    last_login: Optional[datetime] = None
    created_at: Optional[datetime] = None

    def to_authenticated(self) -> AuthenticatedUser:
        return AuthenticatedUser(id=self.id, email=self.email, role=self.role.value)


class OTPCode(BaseModel):
    """A row of the otp_codes table."""

    id: str
    email: str
    code: str = Field(..., min_length=6, max_length=6)
    expires_at: datetime
    used: bool = False
    created_at: Optional[datetime] = None


class Session(BaseModel):
    """A row of the sessions table."""

    id: str
    user_id: str
    token: str
    expires_at: datetime
    created_at: Optional[datetime] = None


# =============================================================================
# Service results
# =============================================================================


class UserSummary(BaseModel):
    """The (id, email) pair handed back after login."""

    id: str
    email: str


class LoginResult(BaseModel):
    """Outcome of a successful OTP verification."""

    token: str = Field(..., description="New session token")
    user: UserSummary


# =============================================================================
# API bodies
# =============================================================================


class SendOTPRequest(BaseModel):
    # Presence is checked by the service so missing fields map to 400
    email: Optional[str] = None


class VerifyOTPRequest(BaseModel):
    email: Optional[str] = None
    code: Optional[str] = None


class VerifyOTPResponse(BaseModel):
    success: bool = True
    message: str = "Authentication successful"
    token: str
    user: UserSummary


class MeResponse(BaseModel):
    success: bool = True
    user: AuthenticatedUser
