"""Configuration management using Pydantic Settings.

This module provides type-safe configuration with automatic environment
variable loading and validation.

The configuration is organized into logical groups:
- LoggingConfig: Logging levels, files, and debugging options
- DomainConfig: Identity and history behavior of domain objects
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    log_file: Path = Path("rich_domain.log")
    real_time_debug: bool = True


class DomainConfig(BaseModel):
    """Behavior shared by every domain object."""

    # Length of short identifiers used as history tokens
    short_id_length: int = Field(default=16, ge=8, le=32)
    # Record a history snapshot on every accepted set/change
    track_history: bool = True


class Settings(BaseSettings):
    """Main settings with environment variable support.

    Environment variables can be set using flat naming or nested naming:
    - Flat: CONSOLE_LOG_LEVEL, SHORT_ID_LENGTH
    - Nested: LOGGING__CONSOLE_LEVEL, DOMAIN__SHORT_ID_LENGTH

    The .env file is automatically loaded for development convenience.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingConfig = LoggingConfig()
    domain: DomainConfig = DomainConfig()

    @model_validator(mode="before")
    @classmethod
    def transform_flat_env_vars(cls, data: Any) -> Any:
        """Transform flat environment variables to nested structure.

        Maps flat env vars (SHORT_ID_LENGTH) to the nested structure
        expected by the models (domain.short_id_length).
        """
        if not isinstance(data, dict):
            return data

        transformed: dict[str, dict[str, Any]] = {}

        log_mapping = {
            "console_log_level": "console_level",
            "file_log_level": "file_level",
            "log_file": "log_file",
            "log_real_time_debug": "real_time_debug",
        }
        for env_key, field_key in log_mapping.items():
            if env_key in data:
                transformed.setdefault("logging", {})[field_key] = data.pop(env_key)

        domain_mapping = {
            "short_id_length": "short_id_length",
            "track_history": "track_history",
        }
        for env_key, field_key in domain_mapping.items():
            if env_key in data:
                transformed.setdefault("domain", {})[field_key] = data.pop(env_key)

        for section, values in transformed.items():
            existing = data.get(section)
            if isinstance(existing, dict):
                values = {**existing, **values}
            data[section] = values

        return data


# Singleton instance for application use
settings = Settings()


# =============================================================================
# FLAT KEY ACCESS
# =============================================================================

_LEGACY_KEY_MAP = {
    "CONSOLE_LOG_LEVEL": lambda: settings.logging.console_level,
    "FILE_LOG_LEVEL": lambda: settings.logging.file_level,
    "LOG_FILE": lambda: settings.logging.log_file,
    "LOG_REAL_TIME_DEBUG": lambda: settings.logging.real_time_debug,
    "SHORT_ID_LENGTH": lambda: settings.domain.short_id_length,
    "TRACK_HISTORY": lambda: settings.domain.track_history,
}


def get_config(key: str, default=None):
    """Get configuration value by flat key with optional default.

    Args:
        key: Configuration key to retrieve
        default: Default value if key not found

    Returns:
        Configuration value or default

    Example:
        >>> get_config("SHORT_ID_LENGTH", 16)
        16
    """
    if key in _LEGACY_KEY_MAP:
        return _LEGACY_KEY_MAP[key]()

    return default
