"""Module de configuration."""

from mini_ini.config.settings import LoggingSettings, StoreSettings
from mini_ini.config.loader import (
    FileSettingsLoader,
    SettingsLoader,
    load_settings,
)

__all__ = [
    "LoggingSettings",
    "StoreSettings",
    "SettingsLoader",
    "FileSettingsLoader",
    "load_settings",
]
