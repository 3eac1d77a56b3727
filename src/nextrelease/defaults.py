"""Valeurs par défaut centralisées.

Objectif : ne pas dupliquer les mêmes valeurs (nom du fichier, formats, groupes) dans plusieurs fichiers.
Le reste du code doit importer depuis ici.
"""

from __future__ import annotations

import re
from typing import Final

# -------------------- Changelog --------------------

DEFAULT_FILENAME: Final[str] = "Changes"

# Jeton qui remplace la version tant que la prochaine release n'est pas publiée.
NEXT_TOKEN: Final[str] = "{{$NEXT}}"
NEXT_TOKEN_RE: Final[re.Pattern[str]] = re.compile(re.escape(NEXT_TOKEN))

DEFAULT_GROUPS: Final[tuple[str, ...]] = (
    "API Changes",
    "Bug Fixes",
    "Enhancements",
    "Documentation",
)


# -------------------- En-tête de release --------------------

DEFAULT_FORMAT_VERSION: Final[str] = "%v"
# Les motifs de date sont des directives strftime.
DEFAULT_FORMAT_DATE: Final[str] = "%{%Y-%m-%d %H:%M:%S %Z}d"
DEFAULT_FORMAT_NOTE: Final[str] = "%{ (TRIAL RELEASE)}T"

DEFAULT_TRIAL_SUFFIX: Final[str] = "-TRIAL"
DEFAULT_DATE_PATTERN: Final[str] = "%Y-%m-%d"


# -------------------- Identité / environnement --------------------

DEFAULT_TIME_ZONE: Final[str] = "local"
DEFAULT_USER_STASH: Final[str] = "%User"
DEFAULT_STASH_FILE: Final[str] = "~/.nextrelease/config.ini"

# Attribut qu'un releaser doit exposer pour fournir l'identifiant rendu par %P.
RELEASER_CAPABILITY: Final[str] = "account_id"
