"""Core services exports."""

from .catalog_handler import CatalogHandler
from .database.db_session import DbSessionService
from .jwt.jwt_verify import InvalidTokenError, JwtVerificationService

__all__ = [
    "CatalogHandler",
    "DbSessionService",
    "InvalidTokenError",
    "JwtVerificationService",
]
