"""
Application Configuration — Pydantic Settings

Centralized configuration for the insights core.
Loads from environment variables (MINDWORK_ prefix) and .env with sensible defaults.

Thresholds are tunable policy, not law: the reference values below mirror
what the recommendation rules have always used.
"""

import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Insights settings loaded from environment variables.

    Priority: Environment variables > .env file > defaults
    """

    # === General ===
    PROJECT_NAME: str = "MindWork Insights"
    ENVIRONMENT: str = "local"  # local, development, staging, production
    LOG_LEVEL: str = "INFO"

    # === Windows ===
    LOOKBACK_DAYS: int = Field(default=30, ge=1, le=365)
    DASHBOARD_DEFAULT_DAYS: int = Field(default=30, ge=1, le=365)

    # === Rule Thresholds (inclusive, ordinal scale 1..5) ===
    STRESS_THRESHOLD: float = Field(default=4.0, ge=1.0, le=5.0)
    WORKLOAD_THRESHOLD: float = Field(default=4.0, ge=1.0, le=5.0)
    LOW_MOOD_THRESHOLD: float = Field(default=2.0, ge=1.0, le=5.0)

    # === Settings Configuration ===
    model_config = SettingsConfigDict(
        env_prefix="MINDWORK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got '{v}'")
        return level


def configure_logging(config: Optional[Settings] = None) -> None:
    """Apply the configured log level to the root logger."""
    config = config or settings
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Singleton instance
settings = Settings()
