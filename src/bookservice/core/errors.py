"""Catalog error taxonomy.

Each error carries the HTTP status it maps to. ``reason`` is the short
human-readable text returned for BadRequest and Conflict; Forbidden and
NotFound responses have no body.
"""


class CatalogError(Exception):
    status_code: int = 500

    def __init__(self, reason: str | None = None) -> None:
        super().__init__(reason or self.__class__.__name__)
        self.reason = reason


class BadRequestError(CatalogError):
    status_code = 400


class ForbiddenError(CatalogError):
    status_code = 403


class NotFoundError(CatalogError):
    status_code = 404


class ConflictError(CatalogError):
    status_code = 409
