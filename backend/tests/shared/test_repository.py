"""Tests for shared/repository.py."""

import httpx
import pytest
from unittest.mock import MagicMock
from postgrest.exceptions import APIError

from shared.exceptions import PersistenceError
from shared.repository import BaseRepository


class ThingRepository(BaseRepository[dict]):
    def get_all(self) -> list[dict]:
        return self._execute(self._db.table("things").select("*"), "get_things")


class TestBaseRepository:
    """Tests for BaseRepository base class."""

    def test_init_stores_db_client(self):
        """Should store the database client in _db attribute."""
        mock_db = MagicMock()
        repo = BaseRepository(mock_db)
        assert repo._db is mock_db

    def test_execute_returns_rows(self):
        """_execute should return the rows of the response."""
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.execute.return_value.data = [
            {"id": "123", "name": "test"}
        ]

        result = ThingRepository(mock_db).get_all()

        assert result == [{"id": "123", "name": "test"}]
        mock_db.table.assert_called_once_with("things")

    def test_execute_returns_empty_list_for_no_data(self):
        """A response without data should read as no rows."""
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.execute.return_value.data = None

        assert ThingRepository(mock_db).get_all() == []

    def test_api_error_becomes_persistence_error(self):
        """PostgREST errors should be translated, keeping the db code for logs."""
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.execute.side_effect = APIError(
            {"message": "relation does not exist", "code": "42P01", "hint": None, "details": None}
        )

        with pytest.raises(PersistenceError) as exc_info:
            ThingRepository(mock_db).get_all()

        assert exc_info.value.operation == "get_things"
        assert exc_info.value.details["db_code"] == "42P01"
        assert "relation" not in exc_info.value.message

    def test_transport_error_becomes_persistence_error(self):
        """Network failures should be translated too."""
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.execute.side_effect = httpx.ConnectError(
            "connection refused"
        )

        with pytest.raises(PersistenceError) as exc_info:
            ThingRepository(mock_db).get_all()

        assert exc_info.value.operation == "get_things"
