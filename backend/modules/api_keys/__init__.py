"""
API keys module.

Long-lived, revocable bearer credentials owned by admins.

Public API:
- IAPIKeyService: Interface for key lifecycle operations
- APIKeySummary / CreatedAPIKey: What callers get to see of a key
"""

from .interfaces import IAPIKeyService
from .models import APIKey, APIKeySummary, CreatedAPIKey
from .exceptions import InvalidKeyNameError

__all__ = [
    "IAPIKeyService",
    "APIKey",
    "APIKeySummary",
    "CreatedAPIKey",
    "InvalidKeyNameError",
]
