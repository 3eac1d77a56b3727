"""Transformations texte → texte appliquées autour d'une release : finalisation puis ajout de la prochaine release."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from nextrelease.changes.header_format import FormatContext, format_header
from nextrelease.changes.model import Release
from nextrelease.changes.parser import parse_changelog
from nextrelease.changes.serializer import serialize_changelog
from nextrelease.defaults import (
    DEFAULT_FORMAT_DATE,
    DEFAULT_FORMAT_NOTE,
    DEFAULT_FORMAT_VERSION,
    NEXT_TOKEN,
    NEXT_TOKEN_RE,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HeaderFormats:
    """Les trois formats utilisés pour rendre l'en-tête de la release finalisée."""

    version: str = DEFAULT_FORMAT_VERSION
    date: str = DEFAULT_FORMAT_DATE
    note: str = DEFAULT_FORMAT_NOTE


def finalize_next_release(
    text: str,
    formats: HeaderFormats,
    ctx: FormatContext,
    *,
    next_token: re.Pattern[str] = NEXT_TOKEN_RE,
) -> str:
    """Remplace l'en-tête de la prochaine release par sa version/date/note et supprime ses catégories vides.

    Si aucune release ne porte le jeton, le texte est retourné tel quel.
    """
    changes = parse_changelog(text, next_token)
    release = changes.find_next_release(next_token)
    if release is None:
        log.debug("Aucune release %s à finaliser", next_token.pattern)
        return text

    # Tous les formats sont rendus avant la moindre modification du modèle.
    version = format_header(formats.version, ctx).strip()
    date = format_header(formats.date, ctx).strip()
    note = format_header(formats.note, ctx).strip()

    release.version, release.date, release.note = version, date, note

    for name in release.empty_categories():
        release.delete_category(name)

    return serialize_changelog(changes)


def append_next_release(
    text: str,
    groups: Iterable[str],
    *,
    token: str = NEXT_TOKEN,
    next_token: re.Pattern[str] = NEXT_TOKEN_RE,
) -> str:
    """Ajoute en tête du changelog une release `token` contenant une catégorie vide par groupe, dans l'ordre."""
    changes = parse_changelog(text, next_token)

    release = Release(version=token)
    for name in groups:
        release.add_category(name)
    changes.add_release(release)

    return serialize_changelog(changes)
