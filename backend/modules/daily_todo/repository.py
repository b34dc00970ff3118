"""
Daily todo repository for database access.
"""

from datetime import datetime
from typing import Optional, Any

from shared.repository import BaseRepository
from .models import DailyTodo


class DailyTodoRepository(BaseRepository[DailyTodo]):
    """Repository for the daily_todos table."""

    TABLE = "daily_todos"

    def get_latest(self, user_id: str) -> Optional[DailyTodo]:
        """Most recently updated row for a user."""
        query = (
            self._db.table(self.TABLE)
            .select("*")
            .eq("user_id", user_id)
            .order("updated_at", desc=True)
            .limit(1)
        )
        rows = self._execute(query, "get_daily_todo")
        return self._map_to_todo(rows[0]) if rows else None

    def upsert(self, user_id: str, content: str, at: datetime) -> DailyTodo:
        """Insert or overwrite the user's row (daily_todos.user_id is unique)."""
        query = self._db.table(self.TABLE).upsert(
            {
                "user_id": user_id,
                "content": content,
                "updated_at": at.isoformat(),
            },
            on_conflict="user_id",
        )
        rows = self._execute(query, "save_daily_todo")
        return self._map_to_todo(rows[0])

    def _map_to_todo(self, data: dict[str, Any]) -> DailyTodo:
        return DailyTodo(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            content=data["content"],
            updated_at=data["updated_at"],
        )
