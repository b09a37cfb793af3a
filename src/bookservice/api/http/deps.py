"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from loguru import logger
from sqlmodel import Session

from src.bookservice.api.http.app_data import ApplicationDependencies
from src.bookservice.core.security import Principal, RequiredClaim, ensure_authorized
from src.bookservice.core.services import (
    CatalogHandler,
    InvalidTokenError,
    JwtVerificationService,
)
from src.bookservice.entities.service.book import BookGateway, BookRepository


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_db_session(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> Iterator[Session]:
    """Request-scoped database session, closed once the response is sent."""
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_jwt_verify_service(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> JwtVerificationService:
    return app_deps.jwt_verify_service


def get_admin_claim(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> RequiredClaim:
    return app_deps.admin_claim


def get_book_gateway(db: Session = Depends(get_db_session)) -> BookGateway:
    return BookRepository(db)


def get_catalog_handler(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
    gateway: BookGateway = Depends(get_book_gateway),
    admin_claim: RequiredClaim = Depends(get_admin_claim),
) -> CatalogHandler:
    return CatalogHandler(
        gateway,
        admin_claim=admin_claim,
        default_limit=app_deps.config.pagination.default_limit,
    )


def get_principal(
    request: Request,
    jwt_verify: JwtVerificationService = Depends(get_jwt_verify_service),
) -> Principal:
    """Resolve the caller from an optional Bearer token.

    A missing or invalid token yields an anonymous principal; read
    endpoints accept it and gated endpoints reject it with 403.
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        return Principal.anonymous()

    token = auth_header.split(" ", 1)[1].strip()
    try:
        return jwt_verify.verify_jwt(token)
    except InvalidTokenError as exc:
        logger.warning("Ignoring invalid bearer token: {}", exc)
        return Principal.anonymous()


def require_admin(
    principal: Principal = Depends(get_principal),
    admin_claim: RequiredClaim = Depends(get_admin_claim),
) -> Principal:
    """Reject callers without the admin claim before the request body is read."""
    ensure_authorized(principal, admin_claim)
    return principal
