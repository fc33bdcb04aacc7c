"""Interface abstraite d'un stockage de configuration par sections.

Ce module définit le contrat (ABC) commun aux stockages clé/valeur
organisés en sections : accès avec valeur par défaut, lecture et
écriture sur flux, synchronisation avec un fichier lié.
"""

from abc import ABC, abstractmethod
from typing import Iterable, TextIO


class ConfigStore(ABC):
    """Interface pour un stockage {section: {clé: valeur}}.

    Les lectures avec valeur par défaut insèrent cette valeur quand
    la clé est absente : interroger toutes les clés attendues suffit
    à compléter un fichier de configuration.
    """

    @abstractmethod
    def get_str(self, section: str, key: str, default: str) -> str:
        """Retourne la valeur, ou insère et retourne `default`.

        Args:
            section: Nom de la section ("" pour la section sans en-tête).
            key: Nom de la clé.
            default: Valeur insérée si la clé est absente.

        Returns:
            La valeur stockée, ou `default`.
        """
        pass

    @abstractmethod
    def set_str(self, section: str, key: str, value: str) -> None:
        """Crée ou remplace une valeur (la section est créée au besoin)."""
        pass

    @abstractmethod
    def exists(self, section: str, key: str) -> bool:
        """Indique si la clé existe, sans rien insérer."""
        pass

    @abstractmethod
    def read_more(self, stream: Iterable[str],
                  ignore_errors: bool = False) -> None:
        """Fusionne le contenu d'un flux dans le contenu existant.

        Raises:
            FormatError: Ligne mal formée, si ignore_errors est False.
        """
        pass

    @abstractmethod
    def read(self, stream: Iterable[str],
             ignore_errors: bool = False) -> None:
        """Remplace tout le contenu par celui du flux."""
        pass

    @abstractmethod
    def write(self, stream: TextIO) -> None:
        """Écrit tout le contenu dans le flux."""
        pass

    @abstractmethod
    def sync(self) -> None:
        """Écrit le contenu dans le fichier lié.

        Raises:
            FileError: Aucun fichier lié, ou fichier non ouvrable.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Synchronise si besoin puis réinitialise le stockage."""
        pass
