"""
Daily todo module interface.
"""

from typing import Any, Protocol, runtime_checkable

from .models import DailyTodo


@runtime_checkable
class IDailyTodoService(Protocol):
    """Interface for the single per-user todo document."""

    async def get(self, user_id: str) -> DailyTodo:
        """
        Get the user's current todo.

        Raises:
            NotFoundError: If the user has never written one
        """
        ...

    async def save(self, user_id: str, content: Any) -> DailyTodo:
        """
        Replace the user's todo content, creating it on first write.

        Raises:
            ValidationError: If content is not a non-empty string
        """
        ...
