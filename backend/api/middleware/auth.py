"""
Bearer authentication dependencies.

Extracts the bearer credential from the request and hands it to the
authentication resolver. Failures are raised as domain exceptions and
turned into 401/403 responses by the registered error handlers.
"""

from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.models import AuthenticatedUser, UserRole
from modules.auth.credentials import is_api_key
from modules.auth.interfaces import IAuthService

from ..dependencies import get_auth_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


def extract_credential(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[str]:
    """
    Pull the bearer credential out of a request.

    The Authorization header wins. API keys may also be passed as an
    `api_key` query parameter; session tokens may not.
    """
    if credentials is not None and credentials.credentials:
        return credentials.credentials

    api_key = request.query_params.get("api_key")
    if is_api_key(api_key):
        return api_key

    return None


async def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """Raw bearer token from the Authorization header, if any."""
    if credentials is None:
        return None
    return credentials.credentials or None


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication with a session token or API key.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    return await auth.authenticate(extract_credential(request, credentials))


async def require_admin(
    user: AuthenticatedUser = Depends(get_current_user),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """Dependency that requires an authenticated admin."""
    auth.authorize(user, UserRole.ADMIN)
    return user

