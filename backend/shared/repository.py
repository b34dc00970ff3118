"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and translating datastore failures into
PersistenceError so that services never see PostgREST or HTTP exceptions.
"""

import logging
from typing import Any, TypeVar, Generic

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from .exceptions import PersistenceError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - _execute() to run a query and map failures to PersistenceError

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class SessionRepository(BaseRepository[Session]):
            def get_by_token(self, token: str) -> Optional[Session]:
                query = self._db.table("sessions").select("*").eq("token", token)
                rows = self._execute(query, "get_session")
                if not rows:
                    return None
                return Session(**rows[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _execute(self, query: Any, operation: str) -> list[dict[str, Any]]:
        """
        Execute a PostgREST query builder and return its rows.

        Args:
            query: A filter/request builder from self._db.table(...)
            operation: Short name of the operation, used for logging

        Returns:
            The returned rows (empty list when nothing matched).

        Raises:
            PersistenceError: If the datastore rejected the request or
                could not be reached.
        """
        try:
            result = query.execute()
        except APIError as e:
            logger.error(f"Datastore error during {operation}: {e.code} {e.message}")
            raise PersistenceError(operation, details={"db_code": e.code}) from e
        except httpx.HTTPError as e:
            logger.error(f"Datastore unreachable during {operation}: {e}")
            raise PersistenceError(operation) from e

        return result.data or []
