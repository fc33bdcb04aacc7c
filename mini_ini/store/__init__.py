"""Module store : stockage INI par sections.

Classes principales:
    - ConfigStore: Interface abstraite du stockage
    - IniStore: Stockage en mémoire lié optionnellement à un fichier
    - IniParser: Lecture du format INI
    - IniSerializer: Écriture du format INI
    - Converter: Paire de conversions pour les accesseurs typés

Example:
    >>> store = IniStore()
    >>> store.read_string("[net]\\nport = 8080\\n")
    >>> store.get("net", "port", 80)
    8080
"""

from mini_ini.store.base import ConfigStore
from mini_ini.store.converters import (
    BOOL,
    DEFAULT_CONVERTERS,
    FLOAT,
    INT,
    MISSING,
    PATH,
    STR,
    Converter,
    converter_for,
    parse_bool,
)
from mini_ini.store.ini_store import IniStore
from mini_ini.store.parser import IniParser, SectionMap
from mini_ini.store.serializer import IniSerializer

__all__ = [
    "ConfigStore",
    "IniStore",
    "IniParser",
    "IniSerializer",
    "SectionMap",
    "Converter",
    "converter_for",
    "parse_bool",
    "DEFAULT_CONVERTERS",
    "MISSING",
    "STR",
    "INT",
    "FLOAT",
    "BOOL",
    "PATH",
]
