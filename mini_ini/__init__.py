"""
Mini INI - Stockage de configuration par sections au format INI.

Modules disponibles:
- store: Stockage INI (IniStore, IniParser, IniSerializer, Converter)
- errors: Exceptions (FormatError, FileError, ...) et handlers d'erreurs
- logging: Gestion des logs (Logger, FileLogger)
- config: Paramètres du store (StoreSettings, FileSettingsLoader)
"""

__version__ = "1.0.0"

from mini_ini.logging import Logger, FileLogger
from mini_ini.config import (
    LoggingSettings,
    StoreSettings,
    SettingsLoader,
    FileSettingsLoader,
    load_settings,
)
from mini_ini.errors import (
    IniError,
    FormatError,
    FileError,
    ConversionError,
    SettingsError,
    ErrorHandler,
    ErrorHandlerChain,
    ConsoleErrorHandler,
    LoggerErrorHandler,
)
from mini_ini.store import (
    ConfigStore,
    IniStore,
    IniParser,
    IniSerializer,
    Converter,
)

__all__ = [
    # Store
    "ConfigStore",
    "IniStore",
    "IniParser",
    "IniSerializer",
    "Converter",
    # Errors
    "IniError",
    "FormatError",
    "FileError",
    "ConversionError",
    "SettingsError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    # Logging
    "Logger",
    "FileLogger",
    # Config
    "LoggingSettings",
    "StoreSettings",
    "SettingsLoader",
    "FileSettingsLoader",
    "load_settings",
]
