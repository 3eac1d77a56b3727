"""Exécution chronométrée des étapes de la ligne de commande, avec un log ✅/❌ par étape."""

import logging
import time
from collections.abc import Callable
from typing import TypeVar

from nextrelease.exceptions.base import AppError

log = logging.getLogger(__name__)

T = TypeVar("T")


def step(name: str, fn: Callable[[], T], *, label: str | None = None, logger: logging.Logger | None = None) -> T:
    """Exécute `fn`, log sa durée et retourne son résultat. Les exceptions sont loguées puis relancées.

    Une `AppError` est signalée sans traceback : son message est rapporté une seule fois par l'appelant.
    """
    start = time.perf_counter()
    if logger is None:
        logger = log
    try:
        result = fn()
    except AppError:
        ms = (time.perf_counter() - start) * 1000
        logger.error("❌ %-50s %8.1f ms", name, ms)
        raise
    except Exception:
        ms = (time.perf_counter() - start) * 1000
        logger.exception("❌ %-50s %8.1f ms", name, ms)
        raise
    ms = (time.perf_counter() - start) * 1000
    shown = f"{name} ({label})" if label else name
    logger.info("✅ %-53s %8.1f ms", shown, ms)
    return result
