"""Stockage INI en mémoire lié optionnellement à un fichier.

Ce module fournit IniStore, qui conserve un dictionnaire
{section: {clé: valeur}}, le lit et l'écrit au format INI, et peut
le synchroniser automatiquement avec un fichier à la fermeture.

Example:
    >>> with IniStore("app.ini", autosync=True) as store:
    ...     width = store.get("window", "width", 800)
    ...     store.set("window", "maximized", True)
"""

from io import StringIO
from os import PathLike
from typing import Any, Iterable, Optional, TextIO, Union

from mini_ini.config.settings import StoreSettings
from mini_ini.errors.exceptions import (
    ConversionError,
    FileError,
    FormatError,
)
from mini_ini.logging.base import Logger
from mini_ini.logging.file_logger import FileLogger
from mini_ini.store.base import ConfigStore
from mini_ini.store.converters import (
    BOOL,
    DEFAULT_CONVERTERS,
    FLOAT,
    INT,
    Converter,
    converter_for,
)
from mini_ini.store.parser import IniParser, SectionMap
from mini_ini.store.serializer import IniSerializer, ordered_sections

FileName = Union[str, PathLike]


class IniStore(ConfigStore):
    """Stockage clé/valeur par sections au format INI.

    L'ordre d'insertion des sections et des clés est conservé; la
    section "" (clés sans en-tête) est toujours parcourue en premier.

    Un IniStore n'est pas thread-safe : l'appelant doit protéger les
    accès concurrents par son propre verrou.

    Attributes:
        data: Dictionnaire {section: {clé: valeur}}.
        encoding: Encodage utilisé pour lire et écrire le fichier lié.
        logger: Logger optionnel pour tracer les opérations fichier.
        converters: Converters par type, utilisés par get() et set().
    """

    def __init__(
        self,
        filename: Optional[FileName] = None,
        autosync: bool = False,
        *,
        ignore_errors: bool = False,
        encoding: str = "utf-8",
        logger: Optional[Logger] = None,
    ) -> None:
        """Initialise le store, et ouvre `filename` s'il est fourni.

        Args:
            filename: Fichier à lire et à lier.
            autosync: Réécrire le fichier lié à la fermeture.
            ignore_errors: Ignorer les lignes mal formées du fichier.
            encoding: Encodage du fichier lié.
            logger: Logger optionnel (injection de dépendance).
        """
        self.data: SectionMap = {}
        self._filename = ""
        self._autosync = False
        self.encoding = encoding
        self.logger = logger
        self.converters: dict[type, Converter] = dict(DEFAULT_CONVERTERS)
        self._parser = IniParser(logger)
        self._serializer = IniSerializer()

        if filename:
            self.open(filename, autosync, ignore_errors)

    @classmethod
    def from_settings(
        cls,
        settings: StoreSettings,
        logger: Optional[Logger] = None
    ) -> "IniStore":
        """Crée et ouvre un store décrit par des StoreSettings.

        Sans logger fourni, un FileLogger est créé si
        settings.logging.file est renseigné.
        """
        if logger is None:
            logger = FileLogger.from_settings(settings.logging)
        return cls(
            settings.filename,
            settings.autosync,
            ignore_errors=settings.ignore_errors,
            encoding=settings.encoding,
            logger=logger,
        )

    def __enter__(self) -> "IniStore":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __del__(self) -> None:
        if getattr(self, "_filename", "") and getattr(self, "_autosync",
                                                      False):
            self.close()

    # Fichier lié

    @property
    def filename(self) -> str:
        """Fichier lié au store ("" si aucun).

        Seul open() (ou ce setter) lie un fichier; read() sur un flux
        fichier ne modifie pas le lien.
        """
        return self._filename

    @filename.setter
    def filename(self, filename: Optional[FileName]) -> None:
        self._filename = str(filename) if filename else ""

    def autosync_enabled(self) -> bool:
        return self._autosync

    def enable_autosync(self, enable: bool = True) -> None:
        self._autosync = enable

    # Accès aux valeurs

    def get_str(self, section: str, key: str, default: str) -> str:
        pairs = self.data.setdefault(section, {})
        return pairs.setdefault(key, default)

    def set_str(self, section: str, key: str, value: str) -> None:
        self.data.setdefault(section, {})[key] = value

    def get(
        self,
        section: str,
        key: str,
        default: Any,
        converter: Optional[Converter] = None
    ) -> Any:
        """Retourne la valeur convertie, ou insère et retourne `default`.

        En cas d'absence, `default` est stocké sous sa forme texte
        (converter.format) et retourné tel quel.

        Args:
            section: Nom de la section.
            key: Nom de la clé.
            default: Valeur par défaut; son type choisit le Converter
                si `converter` n'est pas fourni.
            converter: Converter explicite.

        Returns:
            La valeur convertie, ou `default`.

        Raises:
            ConversionError: Valeur stockée non convertible et
                converter sans fallback.
            TypeError: Aucun Converter pour le type de `default`.
        """
        converter = converter or converter_for(default, self.converters)
        pairs = self.data.setdefault(section, {})
        if key not in pairs:
            pairs[key] = converter.format(default)
            return default

        raw = pairs[key]
        try:
            return converter.parse(raw)
        except (ValueError, TypeError) as e:
            if converter.strict:
                raise ConversionError(
                    section, key, raw, converter.name
                ) from e
            return converter.fallback

    def set(
        self,
        section: str,
        key: str,
        value: Any,
        converter: Optional[Converter] = None
    ) -> None:
        """Stocke `value` sous sa forme texte (converter.format)."""
        converter = converter or converter_for(value, self.converters)
        self.set_str(section, key, converter.format(value))

    def get_int(self, section: str, key: str, default: int = 0) -> int:
        return self.get(section, key, default, INT)

    def get_float(self, section: str, key: str,
                  default: float = 0.0) -> float:
        return self.get(section, key, default, FLOAT)

    def get_bool(self, section: str, key: str,
                 default: bool = False) -> bool:
        return self.get(section, key, default, BOOL)

    def register_converter(self, value_type: type,
                           converter: Converter) -> None:
        """Associe un Converter à un type pour ce store uniquement."""
        self.converters[value_type] = converter

    def exists(self, section: str, key: str) -> bool:
        pairs = self.data.get(section)
        return pairs is not None and key in pairs

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, tuple) or len(item) != 2:
            return False
        return self.exists(*item)

    def __len__(self) -> int:
        return len(self.data)

    def sections(self) -> list[str]:
        """Noms des sections, dans l'ordre d'écriture."""
        return list(ordered_sections(self.data))

    def keys(self, section: str) -> list[str]:
        return list(self.data.get(section, {}))

    def remove(self, section: str, key: str) -> bool:
        """Supprime une clé; retourne False si elle n'existait pas."""
        pairs = self.data.get(section)
        if pairs is None or key not in pairs:
            return False
        del pairs[key]
        return True

    def remove_section(self, section: str) -> bool:
        return self.data.pop(section, None) is not None

    def clear(self) -> None:
        self.data.clear()

    def to_dict(self) -> SectionMap:
        """Copie profonde du contenu, dans l'ordre d'écriture."""
        return {name: dict(self.data[name])
                for name in ordered_sections(self.data)}

    # Flux

    def read_more(self, stream: Iterable[str],
                  ignore_errors: bool = False) -> None:
        self._parser.parse(stream, self.data, ignore_errors)

    def read(self, stream: Iterable[str],
             ignore_errors: bool = False) -> None:
        """Remplace tout le contenu par celui du flux.

        Le flux est d'abord lu dans un dictionnaire neuf : si la lecture
        échoue, le contenu actuel est conservé.
        """
        data = self._parser.parse(stream, {}, ignore_errors)
        self.data.clear()
        self.data.update(data)

    def read_string(self, text: str, ignore_errors: bool = False) -> None:
        """Remplace le contenu par celui du texte INI `text`."""
        self.read(StringIO(text, newline=None), ignore_errors)

    def write(self, stream: TextIO) -> None:
        self._serializer.write(self.data, stream)

    def to_ini(self) -> str:
        return self._serializer.to_string(self.data)

    # Cycle de vie du fichier

    def open(self, filename: FileName, autosync: bool,
             ignore_errors: bool = False) -> None:
        """Lit le fichier et le lie au store.

        Le fichier et le mode autosync sont enregistrés même si le
        fichier n'existe pas ou n'est pas lisible : le contenu reste
        alors inchangé, et sync() pourra créer le fichier.

        Si le contenu est invalide (ligne mal formée, octets non
        décodables), FormatError est levée avant toute modification :
        ni le contenu ni le lien du store ne changent, et le fichier
        ne risque pas d'être réécrit à la fermeture.

        Args:
            filename: Fichier à ouvrir.
            autosync: Réécrire le fichier à la fermeture.
            ignore_errors: Ignorer les lignes mal formées.

        Raises:
            FormatError: Contenu mal formé (si ignore_errors est False)
                ou non décodable dans self.encoding.
        """
        path = str(filename) if filename else ""
        try:
            with open(path, "rb") as stream:
                raw = stream.read()
        except OSError as e:
            if self.logger:
                self.logger.log_warning(
                    f"Fichier {path} non lisible, contenu inchangé : {e}"
                )
            self._link(path, autosync)
            return

        self.read_string(self._decode(raw, path), ignore_errors)
        self._link(path, autosync)
        if self.logger:
            self.logger.log_info(
                f"Fichier {path} lu ({len(self.data)} sections)."
            )

    def _link(self, path: str, autosync: bool) -> None:
        self._filename = path
        self._autosync = autosync

    def _decode(self, raw: bytes, path: str) -> str:
        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            line = raw[:e.start].count(b"\n") + 1
            raise FormatError(
                f"Fichier {path} non décodable en {self.encoding} "
                f"à la ligne {line}",
                line,
            ) from e

    def sync(self) -> None:
        if not self._filename:
            raise FileError(
                "Aucun fichier lié à synchroniser avec ce store !"
            )

        try:
            stream = open(self._filename, "w", encoding=self.encoding)
        except OSError as e:
            raise FileError(
                f"Impossible d'ouvrir le fichier INI "
                f"\"{self._filename}\" : {e}",
                self._filename,
            ) from e

        with stream:
            self.write(stream)
        if self.logger:
            self.logger.log_info(f"Fichier {self._filename} synchronisé.")

    def close(self) -> None:
        """Synchronise le fichier lié si autosync, puis réinitialise.

        Si la synchronisation échoue, l'erreur est propagée et le store
        reste intact.

        Raises:
            FileError: Si la synchronisation automatique échoue.
        """
        filename = self._filename
        if filename and self._autosync:
            self.sync()
        self.data.clear()
        self._filename = ""
        self._autosync = False
        if filename and self.logger:
            self.logger.log_info(f"Store lié à {filename} fermé.")
