"""Tests for shared/config.py."""

from unittest.mock import patch
import os

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.app_name == "DabotCentral API"
        assert settings.debug is False
        assert settings.port == 3001
        assert settings.host == "0.0.0.0"
        assert settings.api_prefix == "/api"
        assert settings.otp_ttl_minutes == 10
        assert settings.session_ttl_days == 30
        assert settings.otp_discard_on_delivery_failure is False
        assert settings.daily_todo_write_requires_admin is True

    def test_cors_defaults(self):
        """CORS should allow any origin with credentials by default."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.cors_origins == ["*"]
        assert settings.cors_allow_credentials is True
        assert set(settings.cors_allow_methods) == {"GET", "POST", "DELETE", "OPTIONS"}
        assert set(settings.cors_allow_headers) == {"Authorization", "Content-Type"}

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {"DEBUG": "true", "PORT": "9000"}):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.port == 9000

    def test_loads_integration_config_from_env(self):
        """Settings should load Supabase and Resend configuration."""
        with patch.dict(os.environ, {
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
            "RESEND_API_KEY": "re_123",
            "EMAIL_FROM": "Team <team@example.com>",
        }):
            settings = Settings(_env_file=None)
            assert settings.supabase_url == "https://test.supabase.co"
            assert settings.supabase_service_role_key == "test-service-key"
            assert settings.resend_api_key == "re_123"
            assert settings.email_from == "Team <team@example.com>"

    def test_loads_policies_from_env(self):
        """Policy switches should be configurable."""
        with patch.dict(os.environ, {
            "OTP_DISCARD_ON_DELIVERY_FAILURE": "true",
            "DAILY_TODO_WRITE_REQUIRES_ADMIN": "false",
        }):
            settings = Settings(_env_file=None)
            assert settings.otp_discard_on_delivery_failure is True
            assert settings.daily_todo_write_requires_admin is False


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_caches(self):
        """get_settings should return cached instance."""
        get_settings.cache_clear()
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2
