"""
API key repository for database access.

Encapsulates all Supabase queries for the api_keys table. Listing selects
only the summary columns so raw keys never leave the database on that path.
"""

from datetime import datetime
from typing import Optional, Any

from shared.repository import BaseRepository
from .models import APIKey, APIKeySummary

SUMMARY_COLUMNS = "id, name, created_at, last_used_at, is_active"


class APIKeyRepository(BaseRepository[APIKey]):
    """Repository for the api_keys table."""

    TABLE = "api_keys"

    def create(self, user_id: str, key: str, name: str) -> APIKey:
        query = self._db.table(self.TABLE).insert(
            {
                "user_id": user_id,
                "key": key,
                "name": name,
            }
        )
        rows = self._execute(query, "create_api_key")
        return self._map_to_key(rows[0])

    def get_by_key(self, key: str) -> Optional[APIKey]:
        query = self._db.table(self.TABLE).select("*").eq("key", key).limit(1)
        rows = self._execute(query, "get_api_key")
        return self._map_to_key(rows[0]) if rows else None

    def list_for_user(self, user_id: str) -> list[APIKeySummary]:
        query = (
            self._db.table(self.TABLE)
            .select(SUMMARY_COLUMNS)
            .eq("user_id", user_id)
            .order("created_at", desc=True)
        )
        rows = self._execute(query, "list_api_keys")
        return [self._map_to_summary(row) for row in rows]

    def deactivate(self, user_id: str, key_id: str) -> None:
        """Set is_active to false; the user_id filter is the ownership check."""
        query = (
            self._db.table(self.TABLE)
            .update({"is_active": False})
            .eq("id", key_id)
            .eq("user_id", user_id)
        )
        self._execute(query, "revoke_api_key")

    def touch(self, key_id: str, at: datetime) -> None:
        query = (
            self._db.table(self.TABLE)
            .update({"last_used_at": at.isoformat()})
            .eq("id", key_id)
        )
        self._execute(query, "touch_api_key")

    def _map_to_key(self, data: dict[str, Any]) -> APIKey:
        return APIKey(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            key=data["key"],
            name=data["name"],
            is_active=data.get("is_active", True),
            last_used_at=data.get("last_used_at"),
            created_at=data.get("created_at"),
        )

    def _map_to_summary(self, data: dict[str, Any]) -> APIKeySummary:
        return APIKeySummary(
            id=str(data["id"]),
            name=data["name"],
            created_at=data.get("created_at"),
            last_used_at=data.get("last_used_at"),
            is_active=data.get("is_active", True),
        )
