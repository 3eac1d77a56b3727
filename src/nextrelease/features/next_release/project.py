"""Implémentations locales des collaborateurs : fichiers d'un dossier, écriture sur disque, stash INI, releaser."""

from __future__ import annotations

import configparser
import logging
from dataclasses import dataclass
from pathlib import Path

from nextrelease.features.next_release.protocol import ProjectFile

log = logging.getLogger(__name__)


@dataclass(slots=True)
class DirectoryFiles:
    """Fichiers d'un projet situés sous `root`, lus à la demande."""

    root: Path
    encoding: str = "utf-8"

    def find(self, name: str) -> ProjectFile | None:
        """Lit `root/name` et le retourne, ou None si le fichier n'existe pas."""
        path = self.root / name
        if not path.is_file():
            return None
        with path.open(encoding=self.encoding, newline="") as f:
            return ProjectFile(name=name, content=f.read(), encoding=self.encoding)


@dataclass(slots=True)
class FileWriter:
    """Écrit les fichiers sous `root`, sans traduction des fins de ligne."""

    root: Path

    def write(self, filename: str, encoding: str, text: str) -> None:
        """Remplace le contenu de `root/filename` par `text`."""
        path = self.root / filename
        with path.open("w", encoding=encoding, newline="") as f:
            f.write(text)
        log.debug("%s écrit (%s)", path, encoding)


@dataclass(frozen=True, slots=True)
class AccountReleaser:
    """Releaser qui fournit un identifiant de compte (utilisé par le code `%P`)."""

    account_id: str


def load_stashes(path: Path) -> dict[str, dict[str, str]]:
    """Charge les stashes depuis un fichier INI : une section par stash (ex: `[%User]` avec `name` et `email`).

    Retourne un dictionnaire vide si le fichier n'existe pas.
    """
    parser = configparser.ConfigParser(interpolation=None)
    if not parser.read(path, encoding="utf-8"):
        log.debug("Aucun fichier de stash trouvé: %s", path)
        return {}
    return {section: dict(parser.items(section)) for section in parser.sections()}
