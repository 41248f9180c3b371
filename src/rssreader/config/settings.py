"""Configuration management using pydantic-settings.

Supports environment variables (RSSREADER_ prefix) and .env file loading.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration.

    Reason: pydantic-settings gives typed config with environment and .env
    overrides, so the feeds path and fetch limits need no code changes.
    Values are handed to storage, fetchers and the HTTP client at construction,
    so tests and callers can build components from any Settings instance.
    """

    model_config = SettingsConfigDict(
        env_prefix="RSSREADER_",
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "rssreader"
    log_level: str = "WARNING"
    log_json: bool = False

    # Storage
    feeds_path: Path = Field(
        default_factory=lambda: Path.home() / ".feeds",
        description="Flat file holding one feed descriptor per line",
    )

    # Fetching
    fetch_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Deadline in seconds for a single feed fetch",
    )
    max_concurrency: int = Field(
        default=16,
        ge=1,
        description="Maximum number of feeds fetched at the same time",
    )
    user_agent: str = "rssreader/1.0"


# Global singleton instance
settings = Settings()
