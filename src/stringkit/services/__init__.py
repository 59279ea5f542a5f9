"""Service layer helpers for stringkit."""

from .settings import Settings, SettingsStore, configure, get_settings, reset_settings

__all__ = [
    "Settings",
    "SettingsStore",
    "configure",
    "get_settings",
    "reset_settings",
]
