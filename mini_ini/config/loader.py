"""Chargement des paramètres du store depuis un fichier TOML ou JSON."""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import BaseModel, ValidationError

from mini_ini.config.settings import StoreSettings
from mini_ini.errors.exceptions import SettingsError


class SettingsLoader(ABC):
    """
    Interface abstraite pour le chargement des paramètres.

    Permet l'injection de dépendance et facilite les tests
    en permettant de substituer l'implémentation réelle par un mock.
    """

    @abstractmethod
    def load(
        self,
        config_path: Union[str, Path],
        schema: type[BaseModel] = StoreSettings
    ) -> BaseModel:
        """
        Charge un fichier de paramètres.

        Args:
            config_path: Chemin vers le fichier de paramètres
            schema: Modèle pydantic utilisé pour la validation

        Returns:
            Instance validée du schema

        Raises:
            SettingsError: Si le fichier est absent, non supporté
                ou invalide
        """
        pass


class FileSettingsLoader(SettingsLoader):
    """
    Chargeur de paramètres depuis fichiers.

    Supporte les formats TOML et JSON, détectés automatiquement
    par l'extension du fichier. Les paramètres peuvent être à la
    racine du fichier ou dans une table [mini_ini].
    """

    SECTION = "mini_ini"

    def load(
        self,
        config_path: Union[str, Path],
        schema: type[BaseModel] = StoreSettings
    ) -> BaseModel:
        path = Path(config_path)

        if not path.exists():
            raise SettingsError(
                f"Fichier de paramètres non trouvé: {path}"
            )

        raw = self._read_raw(path)
        if isinstance(raw.get(self.SECTION), dict):
            raw = raw[self.SECTION]

        try:
            return schema.model_validate(raw)
        except ValidationError as e:
            raise SettingsError(
                f"Paramètres invalides dans {path}: {e}"
            ) from e

    @staticmethod
    def _read_raw(path: Path) -> Dict[str, Any]:
        """Lit le contenu brut du fichier selon son extension.

        Raises:
            SettingsError: Extension non supportée ou contenu illisible.
        """
        suffix = path.suffix.lower()
        try:
            if suffix == ".toml":
                with open(path, "rb") as f:
                    return tomllib.load(f)
            if suffix == ".json":
                with open(path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise SettingsError(
                        f"Le fichier {path} doit contenir un objet JSON"
                    )
                return data
        except (tomllib.TOMLDecodeError, json.JSONDecodeError) as e:
            raise SettingsError(f"Fichier {path} illisible: {e}") from e

        raise SettingsError(
            f"Extension non supportée: {suffix}. "
            "Utilisez .toml ou .json"
        )


def load_settings(config_path: Union[str, Path]) -> StoreSettings:
    """
    Charge des StoreSettings (fonction utilitaire).

    Utilise l'implémentation FileSettingsLoader par défaut.
    Pour les tests ou une personnalisation, utiliser directement
    une instance de SettingsLoader.
    """
    return FileSettingsLoader().load(config_path, StoreSettings)
