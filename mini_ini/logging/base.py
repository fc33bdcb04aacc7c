"""Interface abstraite pour le logging.

IniStore et IniParser reçoivent un Logger optionnel : sans logger,
aucune opération n'est tracée.
"""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Interface pour le système de logging.

    Niveaux utilisés par le store :
    - info : fichier lu, synchronisé ou fermé;
    - warning : fichier lié illisible, ligne ignorée en mode tolérant;
    - error : réservé aux handlers d'erreurs de l'application.
    """

    @abstractmethod
    def log_info(self, message: str) -> None:
        pass

    @abstractmethod
    def log_warning(self, message: str) -> None:
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        pass
