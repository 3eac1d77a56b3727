"""Sérialisation canonique d'un `Changelog` en texte (inverse exact de `parse_changelog`)."""

from __future__ import annotations

from typing import Final

from nextrelease.changes.model import Category, Changelog, Release, Verbatim

INDENT: Final[str] = "    "
BULLET: Final[str] = "- "
CONTINUATION: Final[str] = INDENT + " " * len(BULLET)


def serialize_header(release: Release) -> str:
    """Retourne la ligne d'en-tête `version date note`, en omettant les champs vides."""
    parts = (release.version.strip(), release.date.strip(), release.note.strip())
    return " ".join(p for p in parts if p)


def serialize_category(category: Category) -> str:
    """Retourne le bloc d'une catégorie : marqueur `[Nom]` puis une puce par entrée."""
    lines: list[str] = []
    if category.name:
        lines.append(f"{INDENT}[{category.name}]")

    for entry in category.entries:
        if isinstance(entry, Verbatim):
            lines.append(entry.text.rstrip())
            continue
        first, *rest = entry.split("\n")
        lines.append(f"{INDENT}{BULLET}{first}".rstrip())
        lines.extend(f"{CONTINUATION}{line}".rstrip() for line in rest)

    return "\n".join(lines)


def serialize_release(release: Release) -> str:
    """Retourne le bloc complet d'une release : en-tête, texte libre, puis catégories séparées par une ligne vide."""
    head = [serialize_header(release), *(v.text.rstrip() for v in release.extra)]
    blocks = ["\n".join(head)]
    blocks.extend(block for block in map(serialize_category, release.categories) if block)
    return "\n\n".join(blocks)


def serialize_changelog(changes: Changelog) -> str:
    """Convertit le changelog en texte, la release la plus récente en premier."""
    blocks: list[str] = []
    if changes.preamble:
        blocks.append("\n".join(changes.preamble))
    blocks.extend(serialize_release(release) for release in reversed(changes.releases))

    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"
