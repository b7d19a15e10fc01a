"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from vaccine_registry.configs.base import BaseSettings
from vaccine_registry.configs.database import DatabaseSettings


class ApiSettings(BaseSettings):
    """HTTP surface configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="API_",
        case_sensitive=False,
        extra="ignore",
    )

    title: str = Field(default="Vaccine Registry API", description="OpenAPI title")
    prefix: str = Field(default="", description="Route prefix, e.g. /api/v1")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    api: ApiSettings = Field(default_factory=ApiSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from vaccine_registry.configs import get_settings
        settings = get_settings()
    """
    return Settings()
