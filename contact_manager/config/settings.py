"""
Configuration Management for the Contact Manager

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here. Command-line flags
override these values; environment variables and .env provide the defaults.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ContactSettings(BaseSettings):
    """
    Contact manager settings.

    Loads configuration from CONTACTS_* environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="CONTACTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    data_file: str = Field(
        default="p2_data.csv",
        description="Path to the CSV data file"
    )
    verbose: bool = Field(
        default=False,
        description="Report skipped lines when loading the data file"
    )
    log_level: str = Field(
        default="ERROR",
        description="Level for the structured log on stderr"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept level names the logging module knows."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache()
def get_settings() -> ContactSettings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return ContactSettings()
