"""Server settings, read from LADDER_* environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """API server settings; list values are given as JSON in the environment."""

    model_config = SettingsConfigDict(env_prefix="LADDER_")

    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]
