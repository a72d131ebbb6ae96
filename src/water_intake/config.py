"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from water_intake.domain.intake import TimeRange

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    timezone: str = "UTC"
    max_amount_oz: float = 100.0
    default_time_range: TimeRange = TimeRange.WEEK
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
