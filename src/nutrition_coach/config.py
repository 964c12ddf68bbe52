"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from nutrition_coach.app_logging import DEFAULT_LOG_FORMAT

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    fatsecret_client_id: str | None = None
    fatsecret_client_secret: str | None = None
    fatsecret_token_url: str = "https://oauth.fatsecret.com/connect/token"
    fatsecret_api_url: str = "https://platform.fatsecret.com/rest/server.api"
    search_cache_ttl_seconds: int = 300
    search_cache_max_entries: int = 50
    search_timeout_ms: int = 5000
    search_page_size: int = 25
    debug: bool = False
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def has_credentials(client_id: str | None, client_secret: str | None) -> bool:
    """Return True when both values are set and not just whitespace."""
    return bool((client_id or "").strip() and (client_secret or "").strip())


def is_fatsecret_configured(settings: Settings) -> bool:
    """Return True when both FatSecret credentials are set."""
    return has_credentials(
        settings.fatsecret_client_id, settings.fatsecret_client_secret
    )
