"""Interfaces et chaîne de traitement des erreurs du store.

Une application qui embarque un IniStore branche ici l'affichage
console et le logging de ses erreurs, avec un routage par type :
un handler peut ne recevoir que les FormatError, un autre que les
FileError, etc.

Example:
    >>> chain = ErrorHandlerChain()
    >>> chain.add_handler(ConsoleErrorHandler())
    >>> chain.add_handler(LoggerErrorHandler(logger), FileError)
    >>> with chain.guard():
    ...     store = IniStore("app.ini", autosync=True)
"""

import sys
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator

from mini_ini.errors.exceptions import (ConversionError,
                                        FileError,
                                        FormatError,
                                        IniError,
                                        SettingsError)

# Codes de sortie inspirés de sysexits.h, du plus spécifique au plus général
EXIT_CODES: tuple[tuple[type[IniError], int], ...] = (
    (FormatError, 65),
    (ConversionError, 65),
    (FileError, 74),
    (SettingsError, 78),
    (IniError, 1),
)


def exit_code_for(error: Exception) -> int:
    """Retourne le code de sortie associé au type de l'erreur."""
    for error_type, code in EXIT_CODES:
        if isinstance(error, error_type):
            return code
    return 1


class ErrorHandler(ABC):
    """Interface de base pour les handlers d'erreurs."""

    @abstractmethod
    def handle(self, error: Exception) -> None:
        """Traite une erreur.

        Args:
            error: L'exception à traiter.
        """
        pass


class ErrorHandlerChain():
    """Transmet chaque erreur aux handlers dont le filtre correspond.

    Les handlers sont appelés dans l'ordre d'ajout. Un handler ajouté
    sans types reçoit toutes les erreurs.
    """

    def __init__(self):
        self.routes: list[tuple[ErrorHandler, tuple[type[Exception], ...]]] = []

    @property
    def handlers(self) -> list[ErrorHandler]:
        return [handler for handler, _ in self.routes]

    def add_handler(
        self,
        handler: ErrorHandler,
        *error_types: type[Exception]
    ) -> "ErrorHandlerChain":
        """Ajoute un handler, limité éventuellement à certains types.

        Args:
            handler: Le handler d'erreurs à ajouter.
            *error_types: Types d'erreurs transmis à ce handler
                (toutes les erreurs si vide).

        Returns:
            La chaîne elle-même, pour chaîner les appels.
        """
        self.routes.append((handler, error_types or (Exception,)))
        return self

    def handle(self, error: Exception) -> int:
        """Transmet l'erreur aux handlers concernés.

        Returns:
            Nombre de handlers ayant reçu l'erreur.
        """
        reached = 0
        for handler, error_types in self.routes:
            if isinstance(error, error_types):
                handler.handle(error)
                reached += 1
        return reached

    def handle_and_exit(self, error: Exception,
                        exit_code: int | None = None) -> None:
        """Traite l'erreur et termine le programme.

        Args:
            error: L'exception à traiter avant la sortie.
            exit_code: Code de sortie; par défaut, celui associé au
                type de l'erreur (65 format, 74 fichier, 78 paramètres).
        """
        self.handle(error)
        sys.exit(exit_code if exit_code is not None else exit_code_for(error))

    @contextmanager
    def guard(self, exit_on_error: bool = True) -> Iterator["ErrorHandlerChain"]:
        """Traite les IniError levées dans le bloc.

        Args:
            exit_on_error: Terminer le programme après traitement; sinon
                l'erreur est relancée.

        Les autres exceptions traversent le bloc sans être traitées.
        """
        try:
            yield self
        except IniError as e:
            if exit_on_error:
                self.handle_and_exit(e)
            self.handle(e)
            raise
