"""Modèle en mémoire d'un changelog groupé : releases → catégories → entrées.

Les releases sont stockées dans l'ordre chronologique (la plus récente en dernier),
le document texte les présente dans l'ordre inverse (la plus récente en haut).
"""

from __future__ import annotations

import re
from collections.abc import Collection, Iterator
from dataclasses import dataclass, field

from nextrelease.exceptions.changelog import CategoryNotAllowed


@dataclass(frozen=True, slots=True)
class Verbatim:
    """Ligne non comprise par le parseur, conservée telle quelle à sa position d'origine."""

    text: str


Entry = str | Verbatim


@dataclass(slots=True)
class Category:
    """Groupe nommé d'entrées au sein d'une release (ex: "Bug Fixes").

    Une catégorie de nom vide regroupe les puces écrites avant tout marqueur de catégorie.
    """

    name: str
    entries: list[Entry] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Indique si la catégorie ne contient aucune entrée."""
        return not self.entries


@dataclass(slots=True)
class Release:
    """Une version du changelog : champs d'en-tête, texte libre et catégories ordonnées."""

    version: str
    date: str = ""
    note: str = ""
    extra: list[Verbatim] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)

    def category(self, name: str) -> Category | None:
        """Retourne la catégorie `name`, ou None si elle n'existe pas dans cette release."""
        for cat in self.categories:
            if cat.name == name:
                return cat
        return None

    def group_names(self) -> list[str]:
        """Retourne les noms des catégories, dans l'ordre d'insertion."""
        return [cat.name for cat in self.categories]

    def add_category(self, name: str) -> Category:
        """Ajoute une catégorie vide en fin de release, ou retourne celle qui porte déjà ce nom."""
        existing = self.category(name)
        if existing is not None:
            return existing
        cat = Category(name)
        self.categories.append(cat)
        return cat

    def delete_category(self, name: str) -> None:
        """Supprime la catégorie `name` ; ne fait rien si elle n'existe pas."""
        self.categories = [cat for cat in self.categories if cat.name != name]

    def add_entry(self, name: str, text: Entry, *, allowed: Collection[str] | None = None) -> None:
        """Ajoute une entrée dans la catégorie `name`.

        La catégorie est créée si besoin, à condition que `allowed` soit None ou la contienne.
        """
        cat = self.category(name)
        if cat is None:
            if allowed is not None and name not in allowed:
                raise CategoryNotAllowed(name)
            cat = self.add_category(name)
        cat.entries.append(text)

    def empty_categories(self) -> list[str]:
        """Retourne les noms des catégories sans aucune entrée."""
        return [cat.name for cat in self.categories if cat.is_empty()]


@dataclass(slots=True)
class Changelog:
    """Document complet : préambule conservé tel quel puis releases (ordre chronologique)."""

    preamble: list[str] = field(default_factory=list)
    releases: list[Release] = field(default_factory=list)

    def __iter__(self) -> Iterator[Release]:
        return iter(self.releases)

    def __len__(self) -> int:
        return len(self.releases)

    def add_release(self, release: Release) -> None:
        """Ajoute une nouvelle release, qui devient la plus récente."""
        self.releases.append(release)

    def latest(self) -> Release | None:
        """Retourne la release la plus récente, ou None si le changelog n'en contient aucune."""
        return self.releases[-1] if self.releases else None

    def find_next_release(self, next_token: re.Pattern[str]) -> Release | None:
        """Retourne la release la plus récente dont la version est le jeton de prochaine release."""
        for release in reversed(self.releases):
            if next_token.fullmatch(release.version):
                return release
        return None
