"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
Services run for real against an in-memory datastore (tests/fakes.py);
only the network edges (Supabase, Resend) are replaced.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer, get_container, reset_container
from shared.config import Settings
from shared.models import UserRole

from tests.fakes import FakeSupabase, RecordingSender


@pytest.fixture(autouse=True)
def reset_container_singleton():
    """Reset the service container singleton before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="service-role-key",
        resend_api_key="re_test_key",
    )


@pytest.fixture
def fake_db() -> FakeSupabase:
    return FakeSupabase()


@pytest.fixture
def sender() -> RecordingSender:
    return RecordingSender()


@pytest.fixture
def container(settings, fake_db, sender) -> ServiceContainer:
    """Container wired to the in-memory datastore and recording sender."""
    return ServiceContainer(settings=settings, db=fake_db, notifier=sender)


@pytest.fixture
def app(container):
    app = create_app()
    app.dependency_overrides[get_container] = lambda: container
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    """
    Test client for the API.

    Unexpected exceptions become 500 responses instead of propagating, as
    they would behind a real server.
    """
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def login(client, sender):
    """
    Log an email in through the real OTP flow.

    Returns:
        Function taking an email and returning the verify-otp response body
    """

    def _login(email: str) -> dict:
        response = client.post("/api/auth/send-otp", json={"email": email})
        assert response.status_code == 200, response.text
        response = client.post(
            "/api/auth/verify-otp",
            json={"email": email, "code": sender.last_code(email)},
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _login


@pytest.fixture
def auth_headers(login):
    """Function returning Authorization headers for a freshly logged-in email."""

    def _headers(email: str = "user@example.com") -> dict[str, str]:
        return {"Authorization": f"Bearer {login(email)['token']}"}

    return _headers


@pytest.fixture
def admin_headers(container, auth_headers) -> dict[str, str]:
    """Authorization headers for a logged-in admin."""
    container.users.set_role("admin@example.com", UserRole.ADMIN)
    return auth_headers("admin@example.com")


@pytest.fixture
def user_headers(auth_headers) -> dict[str, str]:
    """Authorization headers for a logged-in standard user."""
    return auth_headers("user@example.com")


@pytest.fixture
def admin_api_key(client, admin_headers) -> str:
    """A raw API key owned by the admin."""
    response = client.post("/api/admin/api-keys", json={"name": "test key"}, headers=admin_headers)
    assert response.status_code == 200, response.text
    return response.json()["key"]
