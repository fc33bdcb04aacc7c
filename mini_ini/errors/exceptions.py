"""
Module contenant les exceptions du stockage INI.

Toutes les erreurs levées par mini_ini héritent de IniError afin que
l'application appelante puisse les intercepter en un seul point.
"""


class IniError(Exception):
    """Exception de base pour toutes les erreurs mini_ini."""
    pass


class FormatError(IniError):
    """Ligne INI mal formée rencontrée pendant la lecture.

    Attributes:
        line: Numéro de ligne (à partir de 1) de la ligne fautive.
    """

    def __init__(self, message: str, line: int) -> None:
        super().__init__(message)
        self.line = line


class FileError(IniError):
    """Le fichier lié ne peut pas être synchronisé.

    Attributes:
        filename: Nom du fichier concerné (vide si aucun fichier lié).
    """

    def __init__(self, message: str, filename: str = "") -> None:
        super().__init__(message)
        self.filename = filename


class ConversionError(IniError, ValueError):
    """Une valeur stockée ne peut pas être convertie dans le type demandé."""

    def __init__(self, section: str, key: str, value: str,
                 target: str) -> None:
        super().__init__(
            f"Impossible de convertir [{section}] {key} = {value!r} "
            f"en {target}"
        )
        self.section = section
        self.key = key
        self.value = value


class SettingsError(IniError):
    """Fichier de paramètres absent, non supporté ou invalide."""
    pass
