"""Configuration for the partner desk HTTP service."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Service settings loaded from environment variables."""

    # Auth for the remote partner change webhook
    SYNC_WEBHOOK_KEY: str

    # Optional outbound partner sync
    PARTNER_SYNC_URL: str = ""
    PARTNER_SYNC_API_KEY: str = ""
    PARTNER_SYNC_TIMEOUT_SECONDS: float = 10.0

    # Logging
    LOG_JSON: bool = True
    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()
