"""
Shared infrastructure for the DabotCentral backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory
- exceptions: Base exception classes
- repository: Base repository with datastore error translation
- logging: Root logger configuration

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import create_supabase_client
from .exceptions import (
    DabotError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    PersistenceError,
    DeliveryError,
)
from .models import AuthenticatedUser, MessageResponse, UserRole

__all__ = [
    "Settings",
    "get_settings",
    "create_supabase_client",
    "DabotError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "PersistenceError",
    "DeliveryError",
    "AuthenticatedUser",
    "MessageResponse",
    "UserRole",
]
