"""Application configuration loading."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the command-line interface, read from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="UTILKIT_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    log_level: str = Field(default="WARNING")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
