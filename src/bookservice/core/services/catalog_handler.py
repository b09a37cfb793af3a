"""Catalog endpoint handler.

Stateless façade over a book gateway: validates input, checks the admin
claim for mutations, and turns gateway results into books or catalog
errors. Gateway failures are not caught here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from src.bookservice.core.errors import BadRequestError, ConflictError, NotFoundError
from src.bookservice.core.security import Principal, RequiredClaim, ensure_authorized
from src.bookservice.entities.service.book import (
    Book,
    BookGateway,
    BookQuery,
    CreateBookRequest,
)

if TYPE_CHECKING:
    from loguru import Logger

INVALID_PAGINATION = "Invalid pagination parameters."
MISSING_PARAMETERS = "All parameters required."
ALREADY_EXISTS = "Book already exists."

# Largest value a 64-bit signed INTEGER column or LIMIT/OFFSET can hold.
MAX_BOOK_ID = 2**63 - 1


def _is_valid_id(book_id: int) -> bool:
    return 0 < book_id <= MAX_BOOK_ID


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class CatalogHandler:
    def __init__(
        self,
        gateway: BookGateway,
        admin_claim: RequiredClaim,
        default_limit: int = 5,
        log: Logger | None = None,
    ) -> None:
        if default_limit <= 0:
            raise ValueError("default_limit must be > 0")
        self._gateway = gateway
        self._admin_claim = admin_claim
        self._default_limit = default_limit
        self._log = (log or logger).bind(component="catalog")

    def list_all(self) -> list[Book]:
        """Every book, unfiltered and unpaginated."""
        return self._gateway.list_all()

    def get_book(self, book_id: int) -> Book:
        # Ids outside the column range can never be stored, so skip the lookup.
        if not _is_valid_id(book_id):
            raise NotFoundError()
        book = self._gateway.find_by_id(book_id)
        if book is None:
            raise NotFoundError()
        return book

    def list_books(
        self,
        offset: int = 0,
        limit: int | None = None,
        author: str | None = None,
        genre: str | None = None,
    ) -> list[Book]:
        """Filtered page of books sorted by title.

        ``author`` and ``genre`` match case-insensitively and are ignored
        when blank.
        """
        if limit is None:
            limit = self._default_limit
        if not 0 <= offset <= MAX_BOOK_ID or not 0 < limit <= MAX_BOOK_ID:
            self._log.info("Rejected pagination offset={} limit={}", offset, limit)
            raise BadRequestError(INVALID_PAGINATION)

        filters = {}
        if not _is_blank(author):
            filters["author"] = author
        if not _is_blank(genre):
            filters["genre"] = genre

        query = BookQuery(filters=filters, order_by="title", offset=offset, limit=limit)
        return self._gateway.query(query)

    def create_book(self, principal: Principal, request: CreateBookRequest) -> Book:
        ensure_authorized(principal, self._admin_claim)

        if request.has_blank_field():
            raise BadRequestError(MISSING_PARAMETERS)

        # Check-then-insert is not atomic; concurrent creates of the same
        # triple can both succeed.
        if self._gateway.exists(request.title, request.author, request.genre):
            self._log.info(
                "Duplicate book rejected title={!r} author={!r} genre={!r}",
                request.title,
                request.author,
                request.genre,
            )
            raise ConflictError(ALREADY_EXISTS)

        book = self._gateway.insert(
            Book(title=request.title, author=request.author, genre=request.genre)
        )
        self._gateway.commit()
        self._log.info("Book {} created by {}", book.id, principal.subject)
        return book

    def delete_book(self, principal: Principal, book_id: int) -> None:
        ensure_authorized(principal, self._admin_claim)

        book = self._gateway.find_by_id(book_id) if _is_valid_id(book_id) else None
        if book is None:
            raise NotFoundError()

        self._gateway.remove(book)
        self._gateway.commit()
        self._log.info("Book {} deleted by {}", book_id, principal.subject)
