"""
Configuration Module

Centralizes engine and batch settings using Pydantic Settings.
Values come from environment variables (prefix ``EMAIL_AUTOCORRECT_``)
or a local .env file.

Usage:
    from email_autocorrect.config.settings import settings

    print(settings.TLD_SOURCE_URL)
    print(settings.DEFAULT_MIN_CONFIDENCE)
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings loaded from environment variables.

    Variable names are case-insensitive.
    """

    # ==========================================================================
    # TLD Registry
    # ==========================================================================
    TLD_SOURCE_URL: str = Field(
        default="https://data.iana.org/TLD/tlds-alpha-by-domain.txt",
        description="Newline-delimited TLD list merged into the registry"
    )
    TLD_FETCH_TIMEOUT: float = Field(
        default=10.0,
        gt=0,
        description="Seconds before the TLD list fetch is abandoned"
    )

    # ==========================================================================
    # Correction
    # ==========================================================================
    DEFAULT_MIN_CONFIDENCE: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Suggestions below this confidence are dropped"
    )

    # ==========================================================================
    # Logging
    # ==========================================================================
    DEBUG: bool = Field(
        default=False,
        description="Enable debug logging"
    )
    LOG_LEVEL: Optional[str] = Field(
        default=None,
        description="Explicit log level; overrides DEBUG when set"
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Emit JSON log lines instead of colored console output"
    )

    model_config = SettingsConfigDict(
        env_prefix="EMAIL_AUTOCORRECT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: loaded once per process
    """
    return Settings()


settings = get_settings()
