"""Modèles pydantic décrivant le comportement d'un IniStore.

Example:
    >>> settings = StoreSettings(filename="app.ini", autosync=True)
    >>> settings.logging.level
    'INFO'
"""

import codecs
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, field_validator

DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class LoggingSettings(BaseModel):
    """Paramètres du FileLogger.

    Attributes:
        level: Niveau minimal des messages.
        format: Format des lignes de log (syntaxe logging).
        file: Fichier de log; None désactive le logging du store.
        console: Dupliquer les messages sur la console.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    file: Optional[Path] = None
    console: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.upper()
        return value


class StoreSettings(BaseModel):
    """Paramètres d'ouverture d'un IniStore.

    Attributes:
        filename: Fichier INI lié au store.
        autosync: Réécrire le fichier à la fermeture.
        ignore_errors: Ignorer les lignes mal formées à la lecture.
        encoding: Encodage du fichier INI.
        logging: Paramètres de logging.
    """

    filename: str
    autosync: bool = False
    ignore_errors: bool = False
    encoding: str = "utf-8"
    logging: LoggingSettings = LoggingSettings()

    @field_validator("filename")
    @classmethod
    def _filename_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("filename ne peut pas être vide")
        return value

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Encodage inconnu : {value}") from e
        return value
