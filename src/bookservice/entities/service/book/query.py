"""Query object for book lookups."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .entity import Book

BOOK_FIELDS = ("id", "title", "author", "genre")
TEXT_FIELDS = ("title", "author", "genre")


@dataclass(frozen=True)
class BookQuery:
    """Field predicates plus sort and skip/take window.

    Filters are case-insensitive equality on text fields and are combined
    with AND. Results are ordered by ``order_by`` ascending, ties broken by id.
    A ``limit`` of None returns everything after ``offset``.
    """

    filters: Mapping[str, str] = field(default_factory=dict)
    order_by: str = "title"
    offset: int = 0
    limit: int | None = None

    def __post_init__(self) -> None:
        unknown = [name for name in self.filters if name not in TEXT_FIELDS]
        if unknown:
            raise ValueError(f"Unsupported filter field(s): {', '.join(unknown)}")
        if self.order_by not in BOOK_FIELDS:
            raise ValueError(f"Unsupported sort field: {self.order_by}")
        if self.offset < 0:
            raise ValueError("offset must be >= 0")
        if self.limit is not None and self.limit <= 0:
            raise ValueError("limit must be > 0")
        object.__setattr__(self, "filters", MappingProxyType(dict(self.filters)))

    def matches(self, book: Book) -> bool:
        return all(
            getattr(book, name).lower() == value.lower()
            for name, value in self.filters.items()
        )

    def apply(self, books: list[Book]) -> list[Book]:
        """Evaluate the query against already loaded records."""
        selected = sorted(
            (book for book in books if self.matches(book)),
            key=lambda book: (getattr(book, self.order_by), book.id or 0),
        )
        end = None if self.limit is None else self.offset + self.limit
        return selected[self.offset : end]
