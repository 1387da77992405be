"""Configuration package."""

from pattern_demos.config.settings import (
    AppSettings,
    BankSettings,
    LibrarySettings,
    Settings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "BankSettings",
    "LibrarySettings",
    "Settings",
    "get_settings",
]
