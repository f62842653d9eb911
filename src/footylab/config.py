"""Environment-driven configuration helpers for FootyLab analytics."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or .env files."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    min_value: float = Field(default=5.0, ge=0.0)
    max_value_bets: int = Field(default=20, ge=1, le=500)
    max_team_insights: int = Field(default=5, ge=1, le=100)

    log_level: str = Field(default="INFO")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()  # type: ignore[call-arg]
