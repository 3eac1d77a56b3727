"""Mini-langage de substitution utilisé pour rendre l'en-tête d'une release.

Un format contient des codes `%X`, éventuellement précédés d'un argument entre accolades `%{arg}X` :

    %v          version courante
    %{motif}d   date/heure courante dans le fuseau configuré (motif strftime)
    %t, %n      retour à la ligne
    %E, %U      email et nom de l'utilisateur
    %{-TRIAL}T  l'argument si la release est une trial, sinon rien
    %{-TRIAL}V  version suivie du comportement de %T
    %P          identifiant de compte fourni par le releaser
    %%          un % littéral

Tout autre code est une erreur.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Final

from nextrelease.defaults import (
    DEFAULT_DATE_PATTERN,
    DEFAULT_STASH_FILE,
    DEFAULT_TIME_ZONE,
    DEFAULT_TRIAL_SUFFIX,
    DEFAULT_USER_STASH,
    RELEASER_CAPABILITY,
)
from nextrelease.exceptions.config import MissingUserInfo
from nextrelease.exceptions.header_format import MissingReleaserCapability, UnknownFormatCode
from nextrelease.utils.timestamp import now_in, resolve_time_zone

_CODE_RE: Final[re.Pattern[str]] = re.compile(r"%(?:\{(?P<arg>[^}]*)\})?(?P<code>.?)", re.DOTALL)


def no_user_info(field: str) -> str:
    """Source d'identité par défaut : aucune information n'est disponible."""
    raise MissingUserInfo(field, DEFAULT_USER_STASH, DEFAULT_STASH_FILE)

def no_releaser_id() -> str:
    """Source de releaser par défaut : aucun releaser ne fournit d'identifiant."""
    raise MissingReleaserCapability(RELEASER_CAPABILITY)


@dataclass(frozen=True, slots=True)
class FormatContext:
    """Valeurs visibles pendant une passe de rendu. Les recherches d'identité et de releaser sont paresseuses.

    Sans source fournie, `%U`, `%E` et `%P` lèvent une erreur plutôt que de rendre un texte vide.
    """

    version: str
    is_trial: bool = False
    time_zone: str = DEFAULT_TIME_ZONE
    user_info: Callable[[str], str] = no_user_info
    releaser_id: Callable[[], str] = no_releaser_id
    clock: Callable[[tzinfo], datetime] = now_in


def _trial(ctx: FormatContext, arg: str | None) -> str:
    return (arg or DEFAULT_TRIAL_SUFFIX) if ctx.is_trial else ""

def _date(ctx: FormatContext, arg: str | None) -> str:
    now = ctx.clock(resolve_time_zone(ctx.time_zone))
    return now.strftime(arg or DEFAULT_DATE_PATTERN)


_CODES: Final[dict[str, Callable[[FormatContext, str | None], str]]] = {
    "v": lambda ctx, arg: ctx.version,
    "d": _date,
    "t": lambda ctx, arg: "\n",
    "n": lambda ctx, arg: "\n",
    "E": lambda ctx, arg: ctx.user_info("email"),
    "U": lambda ctx, arg: ctx.user_info("name"),
    "T": _trial,
    "V": lambda ctx, arg: ctx.version + _trial(ctx, arg),
    "P": lambda ctx, arg: ctx.releaser_id(),
    "%": lambda ctx, arg: "%",
}


def format_header(fmt: str, ctx: FormatContext) -> str:
    """Remplace chaque code `%X` de `fmt` par sa valeur dans le contexte `ctx`."""

    def replace(m: re.Match[str]) -> str:
        code = m.group("code")
        resolver = _CODES.get(code)
        if resolver is None:
            raise UnknownFormatCode(code, fmt)
        return resolver(ctx, m.group("arg"))

    return _CODE_RE.sub(replace, fmt)
