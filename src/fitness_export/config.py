"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    workout_window_days: int = Field(default=4, ge=1)
    debug: bool = False
    max_upload_bytes: int = Field(default=5 * 1024 * 1024, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="FITNESS_EXPORT_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
