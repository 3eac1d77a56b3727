"""Utilitaires pour la gestion de l'heure courante et des fuseaux horaires utilisés dans les en-têtes de release."""

from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from nextrelease.exceptions.config import InvalidTimeZone

LOCAL_TIME_ZONE = "local"


def resolve_time_zone(name: str) -> tzinfo:
    """Retourne le fuseau horaire correspondant à `name`.

    "local" désigne le fuseau du système, tout autre nom est un identifiant IANA (ex: "Europe/Paris").
    """
    if name == LOCAL_TIME_ZONE:
        local = datetime.now().astimezone().tzinfo
        assert local is not None
        return local
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise InvalidTimeZone(name) from e

def now_in(tz: tzinfo) -> datetime:
    """Retourne la date/heure actuelle dans le fuseau horaire donné."""
    return datetime.now(tz)
