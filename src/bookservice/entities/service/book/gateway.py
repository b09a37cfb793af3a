"""Persistence gateway interface for books."""

from abc import ABC, abstractmethod

from .entity import Book
from .query import BookQuery


class BookGateway(ABC):
    """Record store consumed by the catalog handler.

    Storage and transport failures are raised unchanged to the caller.
    """

    @abstractmethod
    def find_by_id(self, book_id: int) -> Book | None:
        """Primary-key lookup."""

    @abstractmethod
    def query(self, query: BookQuery) -> list[Book]:
        """Return the records selected by ``query``, sorted and windowed."""

    @abstractmethod
    def exists(self, title: str, author: str, genre: str) -> bool:
        """Whether a record with exactly this (title, author, genre) is stored."""

    @abstractmethod
    def list_all(self) -> list[Book]:
        """Every stored record, ordered by id."""

    @abstractmethod
    def insert(self, book: Book) -> Book:
        """Stage a new record and return it with its assigned id."""

    @abstractmethod
    def remove(self, book: Book) -> None:
        """Stage removal of an existing record."""

    @abstractmethod
    def commit(self) -> None:
        """Make staged changes durable."""
