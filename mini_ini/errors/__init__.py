"""Module de gestion des erreurs."""

from mini_ini.errors.base import (ErrorHandler,
                                  ErrorHandlerChain,
                                  exit_code_for)
from mini_ini.errors.exceptions import (ConversionError,
                                        FileError,
                                        FormatError,
                                        IniError,
                                        SettingsError)
from mini_ini.errors.console_handler import ConsoleErrorHandler
from mini_ini.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "IniError",
    "FormatError",
    "FileError",
    "ConversionError",
    "SettingsError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "exit_code_for",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
]
