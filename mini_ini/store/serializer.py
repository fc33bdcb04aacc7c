"""Écriture d'un dictionnaire de sections au format INI."""

from io import StringIO
from typing import Iterator, TextIO

from mini_ini.store.parser import SectionMap


def ordered_sections(data: SectionMap) -> Iterator[str]:
    """Itère les noms de section dans l'ordre d'écriture.

    La section "" vient toujours en premier : ses clés n'ont pas
    d'en-tête et seraient sinon relues dans la section précédente.
    """
    if "" in data:
        yield ""
    for name in data:
        if name:
            yield name


class IniSerializer:
    """Produit le texte INI d'un dictionnaire {section: {clé: valeur}}.

    Chaque section s'écrit `[nom]`, puis une ligne `clé = valeur` par
    entrée, puis une ligne vide. La section "" est écrite sans en-tête,
    et omise si elle ne contient aucune clé : contrairement à une section
    nommée vide, elle ne produit pas de ligne vide isolée, qui ne se
    relirait en rien.
    """

    def write(self, data: SectionMap, stream: TextIO) -> None:
        """Écrit `data` dans `stream` sans le fermer ni le vider."""
        for name in ordered_sections(data):
            pairs = data[name]
            if not name and not pairs:
                continue
            if name:
                stream.write(f"[{name}]\n")
            for key, value in pairs.items():
                stream.write(f"{key} = {value}\n")
            stream.write("\n")

    def to_string(self, data: SectionMap) -> str:
        output = StringIO()
        self.write(data, output)
        return output.getvalue()
