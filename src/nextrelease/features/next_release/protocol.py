"""Définit les interfaces des collaborateurs externes utilisés par le service de prochaine release."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(slots=True)
class ProjectFile:
    """Fichier du projet : contenu texte modifiable en mémoire et encodage utilisé pour le réécrire."""

    name: str
    content: str
    encoding: str = "utf-8"


@dataclass(frozen=True, slots=True)
class ProjectInfo:
    """Métadonnées du projet nécessaires au rendu de l'en-tête."""

    version: str
    is_trial: bool = False


class ProjectFiles(Protocol):
    """Accès aux fichiers du projet en cours de release."""

    def find(self, name: str) -> ProjectFile | None:
        """Retourne le fichier `name`, ou None s'il ne fait pas partie du projet."""
        ...


class ChangelogWriter(Protocol):
    """Écriture durable du changelog, en remplaçant le contenu précédent."""

    def write(self, filename: str, encoding: str, text: str) -> None:
        """Écrit `text` dans `filename` avec l'encodage donné."""
        ...
