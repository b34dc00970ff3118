"""
Centralized configuration for the DabotCentral backend.

All settings are loaded from environment variables with sensible defaults.
Integration-specific settings are namespaced (e.g., SUPABASE_*, RESEND_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "DabotCentral API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"

    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["GET", "POST", "DELETE", "OPTIONS"]
    cors_allow_headers: list[str] = ["Authorization", "Content-Type"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct Postgres URI, only used by run_migrations.py

    # Resend (transactional email)
    resend_api_key: str = ""
    resend_api_url: str = "https://api.resend.com/emails"
    email_from: str = "DabotCentral <onboarding@resend.dev>"
    email_timeout_seconds: float = 10.0

    # Credential lifetimes
    otp_ttl_minutes: int = 10
    session_ttl_days: int = 30

    # Policies
    otp_discard_on_delivery_failure: bool = False
    daily_todo_write_requires_admin: bool = True


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
