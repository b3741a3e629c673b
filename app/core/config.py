"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).

Scoring policy (weights, thresholds, bands) is **not** configured here —
it lives in :class:`app.engine.config.ScoringConfig` and is injected at
call time.
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "PRGRM Training-Load Analytics"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["PRGRM"]
    PROJECT_URL: str = "https://prgrm.app"

    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    # Suggestions
    DEFAULT_SUGGESTION_COUNT: int = 3
    MAX_SUGGESTION_COUNT: int = 20

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
