"""
API key module data models.
"""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, Field


class APIKey(BaseModel):
    """A row of the api_keys table, including the raw key."""

    id: str
    user_id: str
    key: str
    name: str
    is_active: bool = True
    last_used_at: Optional[datetime] = None
    created_at: Optional[datetime] = None


class APIKeySummary(BaseModel):
    """What listing exposes about a key. Never carries the key itself."""

    id: str
    name: str
    created_at: Optional[datetime] = None
    last_used_at: Optional[datetime] = None
    is_active: bool = True


class CreatedAPIKey(BaseModel):
    """
    Result of creating a key.

    This is the only place the raw key is ever returned; it cannot be
    recovered afterwards.
    """

    key: str
    id: str
    name: str
    created_at: Optional[datetime] = None


# =============================================================================
# API bodies
# =============================================================================


class CreateAPIKeyRequest(BaseModel):
    # Any JSON value; the service rejects non-strings with a 400
    name: Any = None


class CreateAPIKeyResponse(CreatedAPIKey):
    success: bool = True


class APIKeyListResponse(BaseModel):
    success: bool = True
    keys: list[APIKeySummary] = Field(default_factory=list)
