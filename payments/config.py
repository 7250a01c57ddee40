from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings, read from PAYMENTS_* environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_prefix="PAYMENTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging settings
    log_level: str = "WARNING"
    log_format: Literal["console", "json"] = "console"

    # Output settings
    output_format: Literal["csv", "json"] = "csv"
    include_inactive: bool = False  # list accounts with no applied deposit or withdrawal


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
