"""Book API router."""

from fastapi import APIRouter, Body, Depends, Request, Response, status

from src.bookservice.api.http.deps import (
    get_catalog_handler,
    require_admin,
)
from src.bookservice.core.security import Principal
from src.bookservice.core.services import CatalogHandler
from src.bookservice.entities.service.book import Book, CreateBookRequest

router = APIRouter(prefix="/book", tags=["book"])


@router.get("/all", response_model=list[Book])
def get_all_books(
    handler: CatalogHandler = Depends(get_catalog_handler),
) -> list[Book]:
    """Return all books, for testing purposes."""
    return handler.list_all()


@router.get(
    "/{book_id}",
    response_model=Book,
    responses={404: {"description": "Book with given id doesn't exist."}},
)
def get_book(
    book_id: int,
    handler: CatalogHandler = Depends(get_catalog_handler),
) -> Book:
    """Return the book with the given id."""
    return handler.get_book(book_id)


@router.get(
    "",
    response_model=list[Book],
    responses={400: {"description": "Invalid pagination parameters."}},
)
def list_books(
    offset: int = 0,
    limit: int | None = None,
    author: str | None = None,
    genre: str | None = None,
    handler: CatalogHandler = Depends(get_catalog_handler),
) -> list[Book]:
    """Return up to ``limit`` books starting at ``offset``, sorted by title.

    ``author`` and ``genre`` optionally narrow the result (case-insensitive).
    """
    return handler.list_books(offset=offset, limit=limit, author=author, genre=genre)


@router.post(
    "",
    response_model=Book,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Missing parameters."},
        403: {"description": "Access denied."},
        409: {"description": "Book already exists."},
    },
)
def create_book(
    request: Request,
    response: Response,
    payload: CreateBookRequest | None = Body(default=None),
    principal: Principal = Depends(require_admin),
    handler: CatalogHandler = Depends(get_catalog_handler),
) -> Book:
    """Create a new book. Admin only.

    An absent body is treated like one with every field missing.
    """
    if payload is None:
        payload = CreateBookRequest()
    book = handler.create_book(principal, payload)
    response.headers["Location"] = str(request.url_for("get_book", book_id=book.id))
    return book


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        403: {"description": "Access denied."},
        404: {"description": "Book with given id doesn't exist."},
    },
)
def delete_book(
    book_id: int,
    principal: Principal = Depends(require_admin),
    handler: CatalogHandler = Depends(get_catalog_handler),
) -> Response:
    """Remove the book with the given id. Admin only."""
    handler.delete_book(principal, book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
