"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


# Find .env file: check backend dir first, then project root
_BACKEND_DIR = Path(__file__).parent.parent
_PROJECT_ROOT = _BACKEND_DIR.parent
_ENV_FILE = _BACKEND_DIR / ".env" if (_BACKEND_DIR / ".env").exists() else _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "Marketplace API"
    debug: bool = False
    log_level: str = "INFO"

    # Comma-separated list of allowed origins
    cors_origins: str = "http://localhost:3000"

    # Public URL of the frontend, used for share links
    app_url: str = "http://localhost:3000"

    # Public base URL for stored images (CDN or local storage mount)
    storage_url: str = "/storage"

    # Precision of every timestamp emitted by resources
    timestamp_precision: Literal["milliseconds", "seconds"] = "milliseconds"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()


settings = get_settings()
