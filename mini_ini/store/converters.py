"""Conversions texte <-> valeur pour les accesseurs typés.

Un Converter associe une fonction de lecture (str -> T) et une
fonction d'écriture (T -> str). Par défaut un échec de lecture lève
ConversionError; un Converter qui déclare un `fallback` renvoie
cette valeur à la place.
"""

from dataclasses import dataclass, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Generic, Mapping, TypeVar

T = TypeVar("T")


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


def parse_bool(text: str) -> bool:
    """Interprète 1/0, true/false, yes/no, on/off (sans casse).

    Raises:
        ValueError: Si le texte n'est pas un booléen reconnu.
    """
    word = text.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueError(f"Booléen invalide : {text!r}")


def format_bool(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True)
class Converter(Generic[T]):
    """Paire de fonctions de conversion pour un type donné.

    Attributes:
        parse: Conversion du texte stocké vers la valeur.
        format: Conversion de la valeur vers le texte stocké.
        name: Nom du type, utilisé dans les messages d'erreur.
        fallback: Valeur renvoyée si parse échoue; MISSING pour
            lever une erreur.

    Example:
        >>> Converter(int, str, "int").parse("42")
        42
    """

    parse: Callable[[str], T]
    format: Callable[[T], str] = str
    name: str = "valeur"
    fallback: Any = MISSING

    @property
    def strict(self) -> bool:
        return self.fallback is MISSING

    def with_fallback(self, fallback: T) -> "Converter[T]":
        """Retourne une copie qui renvoie `fallback` au lieu d'échouer."""
        return replace(self, fallback=fallback)


STR = Converter(str, str, "str")
INT = Converter(int, str, "int")
FLOAT = Converter(float, str, "float")
BOOL = Converter(parse_bool, format_bool, "bool")
PATH = Converter(Path, str, "Path")

DEFAULT_CONVERTERS: Mapping[type, Converter] = MappingProxyType({
    str: STR,
    int: INT,
    float: FLOAT,
    bool: BOOL,
    Path: PATH,
})


def converter_for(
    value: Any,
    registry: Mapping[type, Converter] = DEFAULT_CONVERTERS
) -> Converter:
    """Retourne le Converter enregistré pour le type de `value`.

    La recherche suit le MRO, ce qui permet aux sous-classes
    (PosixPath pour Path, par exemple) de trouver leur Converter.

    Raises:
        TypeError: Si aucun Converter ne correspond.
    """
    for klass in type(value).__mro__:
        converter = registry.get(klass)
        if converter is not None:
            return converter
    raise TypeError(
        f"Aucun converter pour le type {type(value).__name__}; "
        "passez converter=..."
    )
