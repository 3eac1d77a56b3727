"""Module contenant la base pour les exceptions personnalisées de nextrelease."""

class AppError(Exception):
    """Classe de base pour les exceptions personnalisées de nextrelease.

    Toutes les exceptions spécifiques à l'application devraient hériter de cette classe.
    La ligne de commande attrape `AppError` pour afficher l'erreur et sortir sans rien écrire.
    """
