"""
Configuration management using Pydantic Settings.

Loads runtime configuration from environment variables and an optional
.env file. Provides type-safe access to:
- CSV output directory
- TDnet listing base URL and page cap
- HTTP client settings (timeout, User-Agent)
"""

import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# The portal never publishes more than this many listing pages for one day
MAX_PAGES_LIMIT = 100

DEFAULT_BASE_URL = "https://www.release.tdnet.info/inbs"


class AppConfig(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Environment Variables (from .env):
        CSV_DIRECTORY: Output directory for CSV files (default: current directory)
        TDNET_BASE_URL: Base URL of the disclosure listing pages
        MAX_PAGES: Maximum number of listing pages fetched per run
                   (at least 1; values above 100 are reduced to 100)
        REQUEST_TIMEOUT: Per-request timeout in seconds (unset = no timeout)
        USER_AGENT: Optional User-Agent header sent with each request
        LOG_LEVEL: Logging level used by the command-line entry point

    Example:
        >>> config = get_app_config()
        >>> config.tdnet_base_url
        'https://www.release.tdnet.info/inbs'
        >>> config.max_pages
        100
    """

    csv_directory: str = Field(
        default="",
        description="Directory for dated CSV output (empty = current directory)"
    )

    tdnet_base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the TDnet disclosure listing pages"
    )

    max_pages: int = Field(
        default=MAX_PAGES_LIMIT,
        ge=1,
        description="Upper bound on listing pages fetched for a single date"
    )

    request_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Per-request timeout in seconds; None leaves the client default"
    )

    user_agent: Optional[str] = Field(
        default=None,
        description="User-Agent header for listing requests"
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level for the command-line entry point"
    )

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    @field_validator('tdnet_base_url')
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Normalize the base URL so page names can be appended with '/'."""
        return value.rstrip('/')

    @field_validator('max_pages')
    @classmethod
    def cap_max_pages(cls, value: int) -> int:
        return min(value, MAX_PAGES_LIMIT)

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Upper-case the level name and reject names logging does not know."""
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level: '{value}'")
        return value


# Singleton pattern - loaded once, cached forever
_app_config: Optional[AppConfig] = None


def get_app_config() -> AppConfig:
    """
    Get global application config instance (lazy-loaded singleton).

    Configuration is loaded from environment variables and .env file.
    Cached after first access.

    Returns:
        Singleton AppConfig instance

    Example:
        >>> config = get_app_config()
        >>> config2 = get_app_config()
        >>> config is config2  # Same instance
        True
    """
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config


def reset_app_config() -> None:
    """Drop the cached config so the next access re-reads the environment."""
    global _app_config
    _app_config = None
