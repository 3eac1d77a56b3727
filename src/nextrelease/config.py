"""Module de configuration de nextrelease, chargé de lire les variables d'environnement (et le .env éventuel).

Comme le nom du changelog, le fuseau horaire, les formats d'en-tête et la liste des groupes.
"""

from __future__ import annotations

import os
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from nextrelease.defaults import (
    DEFAULT_FILENAME,
    DEFAULT_FORMAT_DATE,
    DEFAULT_FORMAT_NOTE,
    DEFAULT_FORMAT_VERSION,
    DEFAULT_GROUPS,
    DEFAULT_STASH_FILE,
    DEFAULT_TIME_ZONE,
    DEFAULT_USER_STASH,
)
from nextrelease.exceptions.config import InvalidEnvVar

_GROUP_SEPARATOR_RE = re.compile(r"\s*,\s*")


def env_str_optional(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Récupère une variable d'environnement optionnelle et retourne None si elle n'est pas définie ou est vide."""
    env = os.environ if environ is None else environ
    value = env.get(name)
    return value if value else None


def env_str(name: str, default: str, environ: Mapping[str, str] | None = None) -> str:
    """Récupère une variable d'environnement, ou `default` si elle n'est pas définie ou est vide."""
    value = env_str_optional(name, environ)
    return default if value is None else value


def parse_groups(value: str | Sequence[str]) -> tuple[str, ...]:
    """Normalise la liste des groupes : accepte une liste ou une chaîne séparée par des virgules ("A, B,C")."""
    if isinstance(value, str):
        items = _GROUP_SEPARATOR_RE.split(value.strip())
    else:
        items = [str(v).strip() for v in value]
    return tuple(item for item in items if item)


@dataclass(frozen=True, slots=True)
class GroupedConfig:
    """Configuration du changelog groupé, avec des valeurs par défaut provenant de `nextrelease.defaults`."""

    filename: str = DEFAULT_FILENAME
    time_zone: str = DEFAULT_TIME_ZONE
    user_stash: str = DEFAULT_USER_STASH
    format_version: str = DEFAULT_FORMAT_VERSION
    format_date: str = DEFAULT_FORMAT_DATE
    format_note: str = DEFAULT_FORMAT_NOTE
    groups: tuple[str, ...] = DEFAULT_GROUPS
    releaser_id: str | None = None
    stash_file: Path = Path(DEFAULT_STASH_FILE).expanduser()

    def __post_init__(self) -> None:
        """Accepte aussi `groups` sous forme de chaîne séparée par des virgules."""
        object.__setattr__(self, "groups", parse_groups(self.groups))


def load_config(environ: Mapping[str, str] | None = None) -> GroupedConfig:
    """Construit la configuration depuis l'environnement (après chargement du .env si `environ` n'est pas fourni)."""
    if environ is None:
        load_dotenv()

    groups = env_str("NEXTRELEASE_GROUPS", ", ".join(DEFAULT_GROUPS), environ)
    if not parse_groups(groups):
        raise InvalidEnvVar("NEXTRELEASE_GROUPS", "liste de groupes séparés par des virgules")

    return GroupedConfig(
        filename=env_str("NEXTRELEASE_FILENAME", DEFAULT_FILENAME, environ),
        time_zone=env_str("NEXTRELEASE_TIME_ZONE", DEFAULT_TIME_ZONE, environ),
        user_stash=env_str("NEXTRELEASE_USER_STASH", DEFAULT_USER_STASH, environ),
        format_version=env_str("NEXTRELEASE_FORMAT_VERSION", DEFAULT_FORMAT_VERSION, environ),
        format_date=env_str("NEXTRELEASE_FORMAT_DATE", DEFAULT_FORMAT_DATE, environ),
        format_note=env_str("NEXTRELEASE_FORMAT_NOTE", DEFAULT_FORMAT_NOTE, environ),
        groups=parse_groups(groups),
        releaser_id=env_str_optional("NEXTRELEASE_RELEASER_ID", environ),
        stash_file=Path(env_str("NEXTRELEASE_CONFIG", DEFAULT_STASH_FILE, environ)).expanduser(),
    )
