"""
Erreurs de persistance.

Côté lecture, ces erreurs sont absorbées (résultat vide ou par défaut + log).
Côté écriture, elles remontent à l'appelant, qui les traduit en réponse HTTP :
  RouteError (RouteNotFound, NoContentPath) → 404
  SerializationError, IoError               → 500
"""


class ContentError(Exception):
    """Base de toutes les erreurs du stockage de contenu."""


class RouteError(ContentError):
    """La route demandée ne mène à aucun fichier de contenu."""

    def __init__(self, route_name: str, message: str):
        super().__init__(message)
        self.route_name = route_name


class RouteNotFound(RouteError):
    def __init__(self, route_name: str):
        super().__init__(route_name, f"Route '{route_name}' introuvable dans routes.json")


class NoContentPath(RouteError):
    def __init__(self, route_name: str):
        super().__init__(route_name, f"Route '{route_name}' sans blockIds")


class SerializationError(ContentError):
    def __init__(self, detail: str):
        super().__init__(f"Sérialisation impossible : {detail}")
        self.detail = detail


class IoError(ContentError):
    def __init__(self, detail: str):
        super().__init__(f"Écriture impossible : {detail}")
        self.detail = detail
