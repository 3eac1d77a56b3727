"""Parseur tolérant pour les changelogs groupés.

Format reconnu (la release la plus récente en haut) :

    Revision history for Foo

    {{$NEXT}}

        [Bug Fixes]
        - une correction
          qui continue sur la ligne suivante

    1.0.0 2024-01-01 12:00:00 UTC

        - première version

Toute ligne non reconnue est conservée telle quelle (`Verbatim`) : le parseur ne lève jamais.
"""

from __future__ import annotations

import re
from typing import Final

from nextrelease.changes.model import Category, Changelog, Release, Verbatim
from nextrelease.defaults import NEXT_TOKEN_RE

_VERSION_PATTERN: Final[str] = r"v?\d[\w.+\-]*(?<!\.)"

_DATE_RE: Final[re.Pattern[str]] = re.compile(
    r"""
    (?P<date>
        \d{4}-\d{2}-\d{2}
        (?:[T\ ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?)?
        (?:
            \ ?(?:Z|[+-]\d{2}(?::?\d{2})?)
          | \ (?:[A-Z]{2,5}|[A-Za-z]+(?:/[A-Za-z0-9_+\-]+)+)
        )?
    )
    (?=\s|$)
    """,
    re.VERBOSE,
)
_CATEGORY_RE: Final[re.Pattern[str]] = re.compile(r"^\s*\[\s*(?P<name>[^\]]*[^\]\s])\s*\]\s*$")
_BULLET_RE: Final[re.Pattern[str]] = re.compile(r"^\s*[-*+](?:\s+(?P<text>.*?))?\s*$")


def _header_re(next_token: re.Pattern[str]) -> re.Pattern[str]:
    """Construit l'expression qui reconnaît une ligne d'en-tête de release (version ou jeton, puis le reste)."""
    return re.compile(
        rf"^(?P<version>(?:{next_token.pattern})|{_VERSION_PATTERN})(?:\s+(?P<rest>.*?))?\s*$"
    )


def split_header_rest(rest: str) -> tuple[str, str]:
    """Sépare la fin d'une ligne d'en-tête en (date, note). La date est vide si la ligne n'en commence pas par une."""
    rest = rest.strip()
    m = _DATE_RE.match(rest)
    if not m:
        return "", rest
    return m.group("date"), rest[m.end():].strip()


def _strip_blank_edges(lines: list[str]) -> list[str]:
    """Retire les lignes vides en début et en fin de liste."""
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]


def parse_changelog(text: str, next_token: re.Pattern[str] = NEXT_TOKEN_RE) -> Changelog:
    """Convertit le texte d'un changelog en `Changelog`.

    Un texte sans aucun en-tête de release donne un changelog sans release, dont tout le contenu est
    conservé dans le préambule.
    """
    header_re = _header_re(next_token)

    preamble: list[str] = []
    newest_first: list[Release] = []
    release: Release | None = None
    category: Category | None = None
    after_bullet = False

    # Seul "\n" sépare les lignes : les autres séparateurs Unicode font partie du contenu.
    for raw in text.split("\n"):
        line = raw.rstrip()

        if release is None:
            m = header_re.match(line)
            if not m:
                preamble.append(line)
                continue
        elif not line:
            continue
        else:
            m = header_re.match(line)

        if m:
            date, note = split_header_rest(m.group("rest") or "")
            release = Release(version=m.group("version"), date=date, note=note)
            newest_first.append(release)
            category = None
            after_bullet = False
            continue

        if cm := _CATEGORY_RE.match(line):
            category = release.add_category(cm.group("name"))
            after_bullet = False
            continue

        if bm := _BULLET_RE.match(line):
            if category is None:
                category = release.add_category("")
            category.entries.append(bm.group("text") or "")
            after_bullet = True
            continue

        # Ligne indentée juste après une puce : suite de la même entrée.
        if after_bullet and line[0].isspace():
            category.entries[-1] = f"{category.entries[-1]}\n{line.strip()}"
            continue

        after_bullet = False
        if category is not None:
            category.entries.append(Verbatim(line))
        else:
            release.extra.append(Verbatim(line))

    newest_first.reverse()
    return Changelog(preamble=_strip_blank_edges(preamble), releases=newest_first)
