"""Module définissant les exceptions liées à la configuration (variables d'environnement, .env, fichier de stash, etc.)."""

from nextrelease.exceptions.base import AppError


class ConfigError(AppError):
    """Erreur de configuration (variables d'environnement, .env, fichier de stash, etc.)."""

class InvalidEnvVar(ConfigError):
    """Erreur indiquant qu'une variable d'environnement a une valeur invalide ou mal formatée."""

    def __init__(self, name: str, expected: str) -> None:
        """Initialise l'exception avec le nom de la variable d'environnement concernée et une description du format attendu."""
        super().__init__(f"Variable d'environnement invalide: {name} (attendu: {expected})")
        self.name = name
        self.expected = expected

class InvalidTimeZone(ConfigError):
    """Erreur indiquant que le fuseau horaire configuré n'est pas connu."""

    def __init__(self, name: str) -> None:
        """Initialise l'exception avec l'identifiant de fuseau horaire refusé."""
        super().__init__(f"Fuseau horaire inconnu: {name}")
        self.name = name

class MissingUserInfo(ConfigError):
    """Erreur indiquant qu'une information utilisateur (nom, email) est absente du stash configuré."""

    def __init__(self, field: str, stash: str, source: str) -> None:
        """Initialise l'exception avec le champ manquant, le nom du stash et le fichier où le renseigner."""
        super().__init__(f"Renseigne ton {field} dans la section [{stash}] de {source}")
        self.field = field
        self.stash = stash
        self.source = source
