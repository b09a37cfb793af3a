"""Entities organized by business concept.

Each entity has its own package containing the domain model, the database
table, and the data-access layer, so everything about a concept lives in
one place.
"""

from .service.book import (
    Book,
    BookGateway,
    BookQuery,
    BookRepository,
    BookTable,
    CreateBookRequest,
    InMemoryBookRepository,
)

__all__ = [
    "Book",
    "BookGateway",
    "BookQuery",
    "BookRepository",
    "BookTable",
    "CreateBookRequest",
    "InMemoryBookRepository",
]
