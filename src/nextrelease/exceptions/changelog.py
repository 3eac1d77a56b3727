"""Module de définition des exceptions liées au fichier de changelog et à son contenu."""

from nextrelease.exceptions.base import AppError


class ChangelogError(AppError):
    """Base de toutes les erreurs liées au changelog."""

class ChangelogNotFound(ChangelogError):
    """Exception levée lorsque le fichier de changelog est introuvable dans le projet."""

    def __init__(self, filename: str) -> None:
        """Initialise l'exception avec le nom du fichier recherché."""
        super().__init__(f"Impossible de trouver {filename} dans le projet.")
        self.filename = filename

class CategoryNotAllowed(ChangelogError):
    """Exception levée lorsqu'une entrée vise une catégorie absente des groupes autorisés."""

    def __init__(self, name: str) -> None:
        """Initialise l'exception avec le nom de la catégorie refusée."""
        super().__init__(f"La catégorie [{name}] ne fait pas partie des groupes configurés.")
        self.name = name
