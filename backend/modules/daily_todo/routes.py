"""
Daily todo endpoints.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_auth_service, get_daily_todo_service, get_app_settings
from shared.config import Settings
from shared.models import AuthenticatedUser, UserRole
from modules.auth.interfaces import IAuthService

from .interfaces import IDailyTodoService
from .models import UpdateDailyTodoRequest, DailyTodoResponse, DailyTodoUpdatedResponse

router = APIRouter()


@router.get("", response_model=DailyTodoResponse)
async def get_daily_todo(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IDailyTodoService = Depends(get_daily_todo_service),
) -> DailyTodoResponse:
    """Get the caller's daily todo."""
    todo = await service.get(user.id)
    return DailyTodoResponse(
        content=todo.content,
        user=user.email,
        last_modified=todo.updated_at,
    )


@router.post("", response_model=DailyTodoUpdatedResponse)
async def update_daily_todo(
    request: UpdateDailyTodoRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    auth: IAuthService = Depends(get_auth_service),
    service: IDailyTodoService = Depends(get_daily_todo_service),
    settings: Settings = Depends(get_app_settings),
) -> DailyTodoUpdatedResponse:
    """Overwrite the caller's daily todo."""
    if settings.daily_todo_write_requires_admin:
        auth.authorize(user, UserRole.ADMIN)

    todo = await service.save(user.id, request.content)
    return DailyTodoUpdatedResponse(last_modified=todo.updated_at)
