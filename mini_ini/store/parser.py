"""Lecture ligne à ligne du format INI.

Format reconnu :
- `[section]` ouvre une section (les espaces autour du nom sont ignorés);
- `clé = valeur` ajoute ou remplace une valeur dans la section courante;
- `#` commence un commentaire jusqu'à la fin de la ligne;
- les lignes vides sont ignorées.

Les clés placées avant toute section appartiennent à la section "".
"""

from typing import Iterable, Optional

from mini_ini.errors.exceptions import FormatError
from mini_ini.logging.base import Logger

SectionMap = dict[str, dict[str, str]]

WHITESPACE = " \t"
COMMENT_CHAR = "#"


class IniParser:
    """Analyseur INI alimentant un dictionnaire {section: {clé: valeur}}.

    Le dictionnaire cible est modifié en place : les sections et clés
    existantes sont conservées sauf si l'entrée les redéfinit.

    Attributes:
        logger: Logger optionnel, reçoit les lignes ignorées en mode
            tolérant.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger = logger

    def parse(
        self,
        lines: Iterable[str],
        data: SectionMap,
        ignore_errors: bool = False
    ) -> SectionMap:
        """Fusionne le contenu INI de `lines` dans `data`.

        Args:
            lines: Flux texte ou tout itérable de lignes.
            data: Dictionnaire cible, modifié en place.
            ignore_errors: Ignorer les lignes mal formées au lieu
                de lever FormatError.

        Returns:
            Le dictionnaire `data`.

        Raises:
            FormatError: Ligne mal formée, si ignore_errors est False.
        """
        section = ""
        for line_number, raw in enumerate(lines, start=1):
            line = self.clean_line(raw)
            if not line:
                continue

            if line[0] == "[":
                name = self._section_name(line)
                if name is None:
                    self._malformed(line_number, line, ignore_errors)
                    continue
                section = name
                data.setdefault(section, {})
                continue

            key, sep, value = line.partition("=")
            if not sep:
                self._malformed(line_number, line, ignore_errors)
                continue
            pairs = data.setdefault(section, {})
            pairs[key.rstrip(WHITESPACE)] = value.lstrip(WHITESPACE)
        return data

    @staticmethod
    def clean_line(raw: str) -> str:
        """Retire fin de ligne, commentaire et espaces superflus."""
        line = raw.rstrip("\r\n").strip(WHITESPACE)
        comment = line.find(COMMENT_CHAR)
        if comment != -1:
            line = line[:comment].rstrip(WHITESPACE)
        return line

    @staticmethod
    def _section_name(line: str) -> Optional[str]:
        end = line.find("]")
        if end == -1:
            return None
        return line[1:end].strip(WHITESPACE)

    def _malformed(
        self, line_number: int, line: str, ignore_errors: bool
    ) -> None:
        if not ignore_errors:
            raise FormatError(
                f"Format INI invalide à la ligne {line_number} : {line!r}",
                line_number,
            )
        if self.logger:
            self.logger.log_warning(
                f"Ligne {line_number} ignorée (format invalide) : {line!r}"
            )
