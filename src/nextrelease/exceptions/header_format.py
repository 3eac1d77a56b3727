"""Module des exceptions levées pendant le rendu des en-têtes de release (codes `%X`)."""

from nextrelease.exceptions.base import AppError


class HeaderFormatError(AppError):
    """Base de toutes les erreurs de rendu d'un format d'en-tête."""

class UnknownFormatCode(HeaderFormatError):
    """Exception levée lorsqu'un format utilise un code qui n'existe pas."""

    def __init__(self, code: str, fmt: str) -> None:
        """Initialise l'exception avec le code inconnu et le format complet qui le contient."""
        shown = f"%{code}" if code else "%"
        super().__init__(f"Code de format inconnu {shown!r} dans {fmt!r}")
        self.code = code
        self.fmt = fmt

class MissingReleaserCapability(HeaderFormatError):
    """Exception levée lorsque `%P` est utilisé mais qu'aucun releaser ne fournit d'identifiant."""

    def __init__(self, capability: str) -> None:
        """Initialise l'exception avec le nom de la capacité attendue sur les releasers."""
        super().__init__(f"Aucun releaser ne fournit {capability}, mais %P est utilisé.")
        self.capability = capability
