"""Utilitaires pour la configuration du logging, avec un format lisible pour la ligne de commande."""

from __future__ import annotations

import logging
import sys


def setup_logging(level: int = logging.INFO) -> None:
    """Configure le logging pour afficher les messages de niveau `level` ou supérieur sur stdout, avec un format lisible."""
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)-10s  %(levelname)-10s  %(name)-30s - %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root.addHandler(handler)
