"""
    LoggerErrorHandler
"""
from mini_ini.errors.base import ErrorHandler
from mini_ini.errors.exceptions import FormatError, IniError
from mini_ini.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Handler pour logger les erreurs.

    Enregistre les erreurs dans le fichier de log via le Logger
    injecté au constructeur.
    """

    def __init__(self, logger: Logger) -> None:
        self.logger = logger

    def handle(self, error: Exception) -> None:
        """Log l'erreur avec un préfixe selon son origine.

        Args:
            error: L'exception à logger.
        """
        if isinstance(error, FormatError):
            self.logger.log_error(
                f"{type(error).__name__} (ligne {error.line}): {error}"
            )
        elif isinstance(error, IniError):
            self.logger.log_error(f"{type(error).__name__}: {str(error)}")
        else:
            self.logger.log_error(
                f"Erreur inattendue: {type(error).__name__}: {str(error)}"
            )
