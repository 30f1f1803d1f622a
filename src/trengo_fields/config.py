"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Trengo
    trengo_signing_secret: str = ""  # Webhook signing key, signature checks not implemented
    trengo_token: str = ""
    trengo_link_field_id: str = ""  # Visible in the URL when editing the custom field
    trengo_api_base_url: str = "https://app.trengo.com/api/v2"

    # App
    environment: str = "development"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
