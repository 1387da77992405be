"""
Configuration Management for Pattern Demos

Uses pydantic-settings for type-safe configuration from environment variables.

Every setting has a default equal to the constant the console programs
have always used, so nothing needs to be configured to run them.
Environment variables (or a .env file) only override those defaults.
"""

from decimal import Decimal
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class BankSettings(BaseSettings):
    """Bank account demo configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BANK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    account_number: str = Field(
        default="123456",
        min_length=1,
        description="Account number opened by the console demo"
    )
    withdrawal_limit: Decimal = Field(
        default=Decimal("500"),
        gt=0,
        description="Maximum amount per withdrawal through a secured account"
    )
    default_pin: str = Field(
        default="1234",
        min_length=1,
        description="PIN stored by a secured account when none is given"
    )
    transaction_log_path: Path = Field(
        default=Path("transaction_log.txt"),
        description="File the transaction logger appends to"
    )


class LibrarySettings(BaseSettings):
    """Library lending demo configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LIBRARY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    default_state_file: str = Field(
        default="library_state.txt",
        description="Filename suggested when saving or loading the catalog"
    )
    seed_sample_books: bool = Field(
        default=True,
        description="Stock the catalog with the sample books on startup"
    )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    debug_mode: bool = Field(
        default=False,
        description="Enable debug mode"
    )
    log_level: str = Field(
        default="WARNING",
        description="Level for structured diagnostics on stderr"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept only the standard logging level names."""
        level = v.strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def bank(self) -> BankSettings:
        return BankSettings()

    @property
    def library(self) -> LibrarySettings:
        return LibrarySettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()
