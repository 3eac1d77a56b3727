"""Module pour la gestion de la version de nextrelease.

Définit une constante VERSION utilisée par la ligne de commande (`nextrelease --version`).
"""
from typing import Final

VERSION: Final[str] = "0.1.0"
