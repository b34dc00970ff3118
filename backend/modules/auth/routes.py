"""
Authentication API endpoints.

Passwordless login: request a code by email, exchange it for a session
token, then send that token as a bearer credential.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user, get_bearer_token
from api.dependencies import get_otp_service, get_session_service
from shared.models import AuthenticatedUser, MessageResponse

from .interfaces import IOTPService, ISessionService
from .exceptions import MissingFieldError
from .models import (
    SendOTPRequest,
    VerifyOTPRequest,
    VerifyOTPResponse,
    MeResponse,
)

router = APIRouter()


@router.post("/send-otp", response_model=MessageResponse)
async def send_otp(
    request: SendOTPRequest,
    otp: IOTPService = Depends(get_otp_service),
) -> MessageResponse:
    """
    Email a 6-digit login code.

    The code is valid for a limited time and can be used once.
    """
    await otp.issue(request.email)
    return MessageResponse(message="OTP code sent to your email")


@router.post("/verify-otp", response_model=VerifyOTPResponse)
async def verify_otp(
    request: VerifyOTPRequest,
    otp: IOTPService = Depends(get_otp_service),
    sessions: ISessionService = Depends(get_session_service),
) -> VerifyOTPResponse:
    """
    Exchange a login code for a session token.

    The user is created on first login.
    """
    email = await otp.verify(request.email, request.code)
    result = await sessions.create_session_for_verified_email(email)
    return VerifyOTPResponse(token=result.token, user=result.user)


@router.get("/me", response_model=MeResponse)
async def get_me(
    user: AuthenticatedUser = Depends(get_current_user),
) -> MeResponse:
    """Get the caller's identity and role."""
    return MeResponse(user=user)


@router.post("/logout", response_model=MessageResponse)
async def logout(
    token: Optional[str] = Depends(get_bearer_token),
    sessions: ISessionService = Depends(get_session_service),
) -> MessageResponse:
    """
    Delete the caller's session.

    Succeeds even if the session was already gone.
    """
    if not token:
        raise MissingFieldError("No token provided", ["authorization"])

    await sessions.revoke(token)
    return MessageResponse(message="Logged out successfully")
