"""Scoring configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="READINESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    env: Literal["development", "production", "test"] = "development"
    log_level: str = "INFO"

    # Weight overrides (JSON objects in env, e.g. {"technical": 0.4, ...})
    pillar_weights: dict[str, float] | None = None
    dimension_weights: dict[str, float] | None = None

    # Recommendation generator limits
    max_recommendations: int = Field(default=10, ge=1)
    max_strengths: int = Field(default=5, ge=1)

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.env == "production"

    @property
    def is_test(self) -> bool:
        """Check if running in test mode."""
        return self.env == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
