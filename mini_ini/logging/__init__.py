"""Module de logging."""

from mini_ini.logging.base import Logger
from mini_ini.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
