"""
Tests for the admin CLI.
"""

import io

import pytest
from rich.console import Console

from main import main
from shared.models import UserRole


class TestGrantAdmin:
    def test_creates_admin(self, container, fake_db):
        assert main(["grant-admin", "ops@example.com"], container=container) == 0
        assert fake_db.rows("users")[0]["email"] == "ops@example.com"
        assert fake_db.rows("users")[0]["role"] == "admin"

    def test_promotes_existing_user(self, container, fake_db, login):
        user_id = login("ops@example.com")["user"]["id"]
        main(["grant-admin", "ops@example.com"], container=container)
        assert container.users.get_by_id(user_id).role == UserRole.ADMIN

    def test_rejects_bad_email(self, container, fake_db):
        with pytest.raises(SystemExit):
            main(["grant-admin", "nope"], container=container)
        assert fake_db.rows("users") == []


class TestKeys:
    @pytest.fixture
    def admin(self, container):
        return container.users.set_role("ops@example.com", UserRole.ADMIN)

    def test_create_list_revoke(self, container, fake_db, admin, monkeypatch):
        output = io.StringIO()
        monkeypatch.setattr("main.console", Console(file=output, width=200))

        assert main(["create-key", "ops@example.com", "deploy"], container=container) == 0
        row = fake_db.rows("api_keys")[0]
        assert row["user_id"] == admin.id
        assert row["name"] == "deploy"

        assert main(["list-keys", "ops@example.com"], container=container) == 0
        assert "deploy" in output.getvalue()
        assert row["key"] in output.getvalue()

        assert main(["revoke-key", "ops@example.com", row["id"]], container=container) == 0
        assert fake_db.rows("api_keys")[0]["is_active"] is False

    def test_unknown_user(self, container):
        with pytest.raises(SystemExit):
            main(["list-keys", "ghost@example.com"], container=container)

    def test_invalid_name_reported(self, container, admin, fake_db):
        assert main(["create-key", "ops@example.com", "  "], container=container) == 1
        assert fake_db.rows("api_keys") == []

    def test_store_failure_reported(self, container, admin, fake_db):
        fake_db.fail("api_keys")
        assert main(["list-keys", "ops@example.com"], container=container) == 1
