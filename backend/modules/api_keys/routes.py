"""
API key management endpoints.

Admin only. Keys are always scoped to the calling admin.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import require_admin
from api.dependencies import get_api_key_service
from shared.models import AuthenticatedUser, MessageResponse

from .interfaces import IAPIKeyService
from .models import CreateAPIKeyRequest, CreateAPIKeyResponse, APIKeyListResponse

router = APIRouter()


@router.post("", response_model=CreateAPIKeyResponse)
async def create_api_key(
    request: CreateAPIKeyRequest,
    user: AuthenticatedUser = Depends(require_admin),
    service: IAPIKeyService = Depends(get_api_key_service),
) -> CreateAPIKeyResponse:
    """
    Create a new API key.

    The raw key is only ever returned here.
    """
    created = await service.create(user.id, request.name)
    return CreateAPIKeyResponse(**created.model_dump())


@router.get("", response_model=APIKeyListResponse)
async def list_api_keys(
    user: AuthenticatedUser = Depends(require_admin),
    service: IAPIKeyService = Depends(get_api_key_service),
) -> APIKeyListResponse:
    """List the caller's keys, newest first."""
    return APIKeyListResponse(keys=await service.list(user.id))


@router.delete("/{key_id}", response_model=MessageResponse)
async def revoke_api_key(
    key_id: str,
    user: AuthenticatedUser = Depends(require_admin),
    service: IAPIKeyService = Depends(get_api_key_service),
) -> MessageResponse:
    """
    Deactivate one of the caller's keys.

    Unknown IDs and other users' keys are accepted silently.
    """
    await service.revoke(user.id, key_id)
    return MessageResponse(message="API key revoked successfully")
