import pytest
from pydantic import ValidationError

from modules.auth.models import (
    User,
    OTPCode,
    SendOTPRequest,
    VerifyOTPRequest,
    VerifyOTPResponse,
    UserSummary,
)
from shared.models import UserRole


class TestUser:
    def test_default_role(self):
        user = User(id="user-123", email="test@example.com")
        assert user.role == UserRole.STANDARD

    def test_to_authenticated(self):
        user = User(id="user-123", email="Test@Example.com", role=UserRole.ADMIN)
        projected = user.to_authenticated()
        assert projected.id == "user-123"
        assert projected.email == "Test@Example.com"
        assert projected.role == "admin"
        assert projected.is_admin

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError):
            User(id="user-123", email="test@example.com", role="superuser")


class TestOTPCode:
    def test_parses_iso_timestamps(self):
        otp = OTPCode(id="1", email="a@example.com", code="123456",
                      expires_at="2030-01-01T00:00:00+00:00")
        assert otp.expires_at.year == 2030
        assert otp.used is False

    def test_code_must_be_six_characters(self):
        with pytest.raises(ValidationError):
            OTPCode(id="1", email="a@example.com", code="123",
                    expires_at="2030-01-01T00:00:00+00:00")


class TestRequestBodies:
    def test_fields_optional(self):
        """Missing fields are reported by the services as 400s, not by parsing."""
        assert SendOTPRequest().email is None
        body = VerifyOTPRequest(email="a@example.com")
        assert body.code is None


class TestVerifyOTPResponse:
    def test_shape(self):
        response = VerifyOTPResponse(
            token="t" * 64,
            user=UserSummary(id="user-123", email="a@example.com"),
        )
        assert response.model_dump() == {
            "success": True,
            "message": "Authentication successful",
            "token": "t" * 64,
            "user": {"id": "user-123", "email": "a@example.com"},
        }
