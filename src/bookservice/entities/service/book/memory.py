"""In-memory book gateway."""

from __future__ import annotations

import threading
from collections.abc import Iterable

from .entity import Book
from .gateway import BookGateway
from .query import BookQuery


class InMemoryBookRepository(BookGateway):
    """List-backed gateway for tests and local experiments.

    Changes are visible immediately; ``commit`` only counts calls so tests
    can assert that a mutation was committed.
    """

    def __init__(self, books: Iterable[Book] | None = None) -> None:
        self._lock = threading.Lock()
        self._books: dict[int, Book] = {}
        self._next_id = 1
        self.commit_count = 0
        for book in books or ():
            self._store(book)

    def _store(self, book: Book) -> Book:
        book_id = book.id if book.id is not None else self._next_id
        stored = book.model_copy(update={"id": book_id})
        self._books[book_id] = stored
        self._next_id = max(self._next_id, book_id + 1)
        return stored.model_copy()

    def __len__(self) -> int:
        return len(self._books)

    def find_by_id(self, book_id: int) -> Book | None:
        with self._lock:
            book = self._books.get(book_id)
            return book.model_copy() if book else None

    def query(self, query: BookQuery) -> list[Book]:
        with self._lock:
            books = [book.model_copy() for book in self._books.values()]
        return query.apply(books)

    def exists(self, title: str, author: str, genre: str) -> bool:
        with self._lock:
            return any(
                book.same_record(title, author, genre) for book in self._books.values()
            )

    def list_all(self) -> list[Book]:
        with self._lock:
            return [self._books[key].model_copy() for key in sorted(self._books)]

    def insert(self, book: Book) -> Book:
        with self._lock:
            return self._store(book.model_copy(update={"id": None}))

    def remove(self, book: Book) -> None:
        with self._lock:
            self._books.pop(book.id, None)

    def commit(self) -> None:
        with self._lock:
            self.commit_count += 1
