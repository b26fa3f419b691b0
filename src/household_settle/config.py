"""Configuration management for household-settle."""

from pathlib import Path

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="HOUSEHOLD_SETTLE_",
        case_sensitive=False,
        extra="ignore",
    )

    # Display
    currency_symbol: str = "€"

    # Default snapshot file used when a command is given no path
    snapshot_path: Path | None = None

    # Logging
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Load application settings from environment variables."""
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(
            f"Failed to load settings. Check the HOUSEHOLD_SETTLE_* variables "
            f"in your environment or .env file.\n"
            f"Error: {e}"
        ) from e
