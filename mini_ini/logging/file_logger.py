"""Implémentation concrète du logger avec fichier."""

import logging
import os
from typing import Optional

from mini_ini.config.settings import LoggingSettings
from mini_ini.logging.base import Logger


class FileLogger(Logger):
    """
    Logger qui écrit dans un fichier avec option console.

    Caractéristiques:
    - Logger unique par fichier (évite les conflits)
    - Encodage UTF-8 explicite
    - Flush immédiat après chaque log
    - Pas de propagation (évite les logs en double)
    - Support optionnel de la sortie console
    """

    def __init__(
        self,
        log_file: str,
        settings: Optional[LoggingSettings] = None,
        console_output: Optional[bool] = None
    ) -> None:
        """
        Initialise le logger.

        Args:
            log_file: Chemin du fichier de log
            settings: Paramètres de logging (niveau, format, console)
            console_output: Force la sortie console; si None, la valeur
                            de settings.console est utilisée
        """
        self.log_file = log_file
        settings = settings or LoggingSettings()
        if console_output is None:
            console_output = settings.console

        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        log_level = getattr(logging, settings.level, logging.INFO)

        self.logger = logging.getLogger(f"mini_ini.{log_file}")
        self.logger.setLevel(log_level)

        # Éviter les handlers dupliqués
        if not self.logger.handlers:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(log_level)
            formatter = logging.Formatter(settings.format)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
            self.handler = file_handler

            if console_output:
                console_handler = logging.StreamHandler()
                console_handler.setLevel(log_level)
                console_handler.setFormatter(formatter)
                self.logger.addHandler(console_handler)
        else:
            self.handler = self.logger.handlers[0]

        self.logger.propagate = False

    @classmethod
    def from_settings(cls, settings: LoggingSettings) -> Optional["FileLogger"]:
        """Construit un logger si settings.file est renseigné.

        Returns:
            Le FileLogger, ou None si aucun fichier n'est configuré.
        """
        if settings.file is None:
            return None
        return cls(str(settings.file), settings)

    def _flush(self) -> None:
        """Force l'écriture immédiate sur le disque."""
        if self.handler:
            self.handler.flush()

    def log_info(self, message: str) -> None:
        self.logger.info(message)
        self._flush()

    def log_warning(self, message: str) -> None:
        self.logger.warning(message)
        self._flush()

    def log_error(self, message: str) -> None:
        self.logger.error(message)
        self._flush()
