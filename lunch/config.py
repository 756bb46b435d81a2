"""Configuration management for the application."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LUNCH_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Database
    database_url: str | None = Field(default=None)  # None -> per-user data file
    data_dir: Path | None = Field(default=None)

    # Rolling
    history_size: int = Field(default=14, ge=1)  # two-week window
    seed_on_first_launch: bool = Field(default=True)

    # Logging
    log_level: str = Field(default="INFO")

    # API
    environment: str = Field(default="development")

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
