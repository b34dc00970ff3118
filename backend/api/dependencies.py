"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations from one explicit
Settings object and one datastore client.

The same container backs the admin CLI, so HTTP handlers and operator
commands run exactly the same service code.
"""

from typing import Optional, TYPE_CHECKING

from fastapi import Depends

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import IAuthService, IOTPService, ISessionService
    from modules.auth.repository import UserRepository
    from modules.api_keys.interfaces import IAPIKeyService
    from modules.daily_todo.interfaces import IDailyTodoService
    from modules.notifications.interfaces import INotificationSender


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Pass `db` and `notifier` to run against test doubles.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        db: "Client | None" = None,
        notifier: "INotificationSender | None" = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._db = db
        self._notifier = notifier
        self._user_repository: "UserRepository | None" = None
        self._otp_service: "IOTPService | None" = None
        self._session_service: "ISessionService | None" = None
        self._api_key_service: "IAPIKeyService | None" = None
        self._auth_service: "IAuthService | None" = None
        self._daily_todo_service: "IDailyTodoService | None" = None

    @property
    def db(self) -> "Client":
        """Get the Supabase client, created from this container's settings."""
        if self._db is None:
            from shared.database import create_supabase_client
            self._db = create_supabase_client(self.settings)
        return self._db

    @property
    def notifier(self) -> "INotificationSender":
        """Get the email sender."""
        if self._notifier is None:
            from modules.notifications.service import build_notification_sender
            self._notifier = build_notification_sender(self.settings)
        return self._notifier

    @property
    def users(self) -> "UserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            self._user_repository = UserRepository(self.db)
        return self._user_repository

    @property
    def otp(self) -> "IOTPService":
        """Get the OTP service instance."""
        if self._otp_service is None:
            from modules.auth.otp import OTPService
            from modules.auth.repository import OTPRepository
            self._otp_service = OTPService(
                repository=OTPRepository(self.db),
                notifier=self.notifier,
                settings=self.settings,
            )
        return self._otp_service

    @property
    def sessions(self) -> "ISessionService":
        """Get the session service instance."""
        if self._session_service is None:
            from modules.auth.sessions import SessionService
            from modules.auth.repository import SessionRepository
            self._session_service = SessionService(
                sessions=SessionRepository(self.db),
                users=self.users,
                settings=self.settings,
            )
        return self._session_service

    @property
    def api_keys(self) -> "IAPIKeyService":
        """Get the API key service instance."""
        if self._api_key_service is None:
            from modules.api_keys.service import APIKeyService
            from modules.api_keys.repository import APIKeyRepository
            self._api_key_service = APIKeyService(APIKeyRepository(self.db))
        return self._api_key_service

    @property
    def auth(self) -> "IAuthService":
        """Get the authentication resolver instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                sessions=self.sessions,
                api_keys=self.api_keys,
                users=self.users,
            )
        return self._auth_service

    @property
    def daily_todo(self) -> "IDailyTodoService":
        """Get the daily todo service instance."""
        if self._daily_todo_service is None:
            from modules.daily_todo.service import DailyTodoService
            from modules.daily_todo.repository import DailyTodoRepository
            self._daily_todo_service = DailyTodoService(DailyTodoRepository(self.db))
        return self._daily_todo_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._user_repository = None
        self._otp_service = None
        self._session_service = None
        self._api_key_service = None
        self._auth_service = None
        self._daily_todo_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls.
# Override get_container in app.dependency_overrides to swap everything at once.


def get_app_settings(container: ServiceContainer = Depends(get_container)) -> Settings:
    """FastAPI dependency for the container's settings."""
    return container.settings


def get_auth_service(container: ServiceContainer = Depends(get_container)) -> "IAuthService":
    """FastAPI dependency for the authentication resolver."""
    return container.auth


def get_otp_service(container: ServiceContainer = Depends(get_container)) -> "IOTPService":
    """FastAPI dependency for the OTP service."""
    return container.otp


def get_session_service(container: ServiceContainer = Depends(get_container)) -> "ISessionService":
    """FastAPI dependency for the session service."""
    return container.sessions


def get_api_key_service(container: ServiceContainer = Depends(get_container)) -> "IAPIKeyService":
    """FastAPI dependency for the API key service."""
    return container.api_keys


def get_daily_todo_service(
    container: ServiceContainer = Depends(get_container),
) -> "IDailyTodoService":
    """FastAPI dependency for the daily todo service."""
    return container.daily_todo
