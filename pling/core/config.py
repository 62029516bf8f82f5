"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables (prefix ``PLING_``).

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Domain defaults (invitation expiry, membership limits) live here so the
  domain layer never reads the environment itself

Usage:
    from pling.core.config import get_settings

    settings = get_settings()
    if settings.is_development:
        # Dev-specific behavior
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pling.core.enums import Environment

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables (``PLING_*``)
        2. Default values (all settings have safe defaults)

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Pling",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Organization domain defaults
    invitation_expiry_days: int = Field(
        default=7,
        description="Days until a pending organization invitation expires",
    )
    default_max_members: int = Field(
        default=3,
        description="Member limit for new organizations (basic plan)",
    )
    default_max_teams: int = Field(
        default=1,
        description="Team limit for new organizations (basic plan)",
    )

    model_config = SettingsConfigDict(
        env_prefix="PLING_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name (any case).

        Returns:
            str: Uppercase log level name.

        Raises:
            ValueError: If the level is not one of the standard five.
        """
        normalized = v.upper().strip()
        if normalized not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(sorted(VALID_LOG_LEVELS))}"
            )
        return normalized

    @field_validator(
        "invitation_expiry_days", "default_max_members", "default_max_teams"
    )
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """
        Limits and durations must be at least 1.

        Args:
            v: Configured value.

        Returns:
            int: Validated value.

        Raises:
            ValueError: If value is less than 1.
        """
        if v < 1:
            raise ValueError("value must be at least 1")
        return v

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing or CI environment.

        Returns:
            bool: True if environment is TESTING or CI, False otherwise.
        """
        return self.environment in {Environment.TESTING, Environment.CI}

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.
    Tests call ``get_settings.cache_clear()`` after patching the environment.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
