"""
    ConsoleErrorHandler (générique, configurable)
"""
from mini_ini.errors.base import ErrorHandler
from mini_ini.errors.exceptions import (ConversionError,
                                        FileError,
                                        FormatError,
                                        IniError,
                                        SettingsError)


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (IniError) des erreurs inattendues,
    et affiche un message de solution adapté au type d'erreur.
    """

    def __init__(
        self,
        solutions: dict[type[Exception], str] | None = None
    ) -> None:
        """Initialise le handler console.

        Args:
            solutions: Dictionnaire {TypeException: "message solution"}
                       prioritaire sur les messages par défaut.
        """
        self.solutions = solutions or {}

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur dans la console avec des messages utilisateur.

        Args:
            error: L'exception à afficher.
        """
        if isinstance(error, IniError):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _solution_for(self, error: IniError) -> str:
        for error_type, solution in self.solutions.items():
            if isinstance(error, error_type):
                return solution
        if isinstance(error, FormatError):
            return (f"Corrigez la ligne {error.line} (attendu: "
                    "[section] ou clé = valeur).")
        if isinstance(error, FileError):
            return ("Vérifiez le chemin du fichier lié et les "
                    "permissions d'écriture.")
        if isinstance(error, ConversionError):
            return "Vérifiez le type de la valeur dans le fichier INI."
        if isinstance(error, SettingsError):
            return "Vérifiez votre fichier de paramètres."
        return "Voir les suggestions ci-dessus."

    def _handle_known_error(self, error: IniError) -> None:
        print(f"\n🛑 {type(error).__name__}: {str(error)}")
        print(f"\n🔧 Solution : {self._solution_for(error)}")

    def _handle_unknown_error(self, error: Exception) -> None:
        print(f"\n💥 Erreur inattendue: {str(error)}")
        print(f"Type: {type(error).__name__}")
