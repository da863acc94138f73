"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    POEAA_LOG_LEVEL: str = Field(default="info")
    POEAA_LOG_DIR: Path | None = Field(default=None)
    POEAA_LOG_SCHEMA_VERSION: str = Field(default="1.0.0")

    # Finder variant placed into freshly initialized registries
    PERSON_FINDER: Literal["always", "never"] = Field(default="always")
    DEFAULT_FIRST_NAME: str = Field(default="John", min_length=1)


settings = Settings()
config = settings  # Alias for callers that read "config"


__all__ = ["Settings", "settings", "config"]
