from __future__ import annotations


class ImportMapError(Exception):
    """Erreur liée à une requête unique ; porte le statut HTTP et le message public."""

    status: int = 500
    message: str = "Import map error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.message)
        self.detail = detail or self.message


class OriginRejected(ImportMapError):
    status = 403
    message = "Origin not allowed"


class MalformedShape(ImportMapError):
    status = 400
    message = "Invalid import map data"


class MethodNotAllowed(ImportMapError):
    status = 405
    message = "Method not allowed"


class SenderScriptUnavailable(ImportMapError):
    status = 500
    message = "Failed to load sender script"
