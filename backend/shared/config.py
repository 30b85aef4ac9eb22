"""
Centralized configuration for the Scholaris backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., RAZORPAY_*, SUPABASE_*).
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
    app_name: str = "Scholaris API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct Postgres URL, migrations only
    supabase_storage_bucket: str = "uploads"
    supabase_storage_prefix: str = "scholaris/uploads"

    # Auth
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    user_token_ttl_hours: int = 24 * 365
    admin_token_ttl_hours: int = 24
    admin_registration_enabled: bool = False  # set ADMIN_REGISTRATION_ENABLED=true to bootstrap an admin
    bcrypt_rounds: int = 12

    # Razorpay
    razorpay_key_id: str = ""
    razorpay_key_secret: str = ""
    razorpay_api_base: str = "https://api.razorpay.com/v1"
    razorpay_timeout_seconds: float = 15.0
    yearly_plan_amount_minor: int = 49900  # paise
    yearly_plan_currency: str = "INR"
    subscription_period_days: int = 365

    # Gemini
    google_api_key: str = ""
    gemini_model: str = "gemini-1.5-flash"
    default_chat_title: str = "New Chat"

    # Chat
    chat_context_window: int = 5
    max_attachment_bytes: int = 20 * 1024 * 1024

    # Category tree
    max_tree_depth: int = 64


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
