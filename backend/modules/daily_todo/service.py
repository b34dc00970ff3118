"""
Daily todo service implementation.

Each user has at most one todo document; writes overwrite it in place.
"""

import logging
from datetime import timedelta
from typing import Any

from shared.models import utc_now

from .exceptions import DailyTodoNotFoundError, InvalidTodoContentError
from .interfaces import IDailyTodoService
from .models import DailyTodo
from .repository import DailyTodoRepository

logger = logging.getLogger(__name__)


class DailyTodoService(IDailyTodoService):
    """Reads and overwrites a user's daily todo."""

    def __init__(self, repository: DailyTodoRepository):
        self._repo = repository

    async def get(self, user_id: str) -> DailyTodo:
        todo = self._repo.get_latest(user_id)
        if todo is None:
            raise DailyTodoNotFoundError(user_id)
        return todo

    async def save(self, user_id: str, content: Any) -> DailyTodo:
        if not isinstance(content, str) or not content:
            raise InvalidTodoContentError()

        # last_modified must move forward on every write, even if the
        # previous write came from a host whose clock ran ahead
        at = utc_now()
        previous = self._repo.get_latest(user_id)
        if previous is not None and previous.updated_at >= at:
            at = previous.updated_at + timedelta(microseconds=1)

        todo = self._repo.upsert(user_id, content, at)
        logger.info(f"Daily todo saved for user {user_id} ({len(content)} chars)")
        return todo
