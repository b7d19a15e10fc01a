"""
Base configuration settings.

Shared by the database and API settings: where values come from (.env and
process environment) and the service-wide knobs read by the app factory.

Dependencies: pydantic, pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BaseSettings(PydanticBaseSettings):
    """Common vaccine registry settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment name attached to startup log records",
    )
    debug: bool = Field(
        default=False,
        description="FastAPI debug mode (tracebacks in 500 responses)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root level passed to configure_logging at app startup",
    )

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, value: str) -> str:
        """Normalize to upper case and reject names logging does not define."""
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level
