"""Tests for the SQLModel and in-memory book gateways.

The SQL repository runs against in-memory SQLite; both gateways are held
to the same query behaviour.
"""

import pytest
from sqlmodel import Session, select

from src.bookservice.entities.service.book import (
    Book,
    BookQuery,
    BookRepository,
    BookTable,
    InMemoryBookRepository,
)


@pytest.fixture(params=["sql", "memory"])
def gateway(request, seeded_repository, sample_books):
    if request.param == "sql":
        return seeded_repository
    return InMemoryBookRepository(sample_books)


class TestGatewayBehaviour:
    def test_find_by_id(self, gateway):
        book = gateway.find_by_id(3)
        assert book == Book(id=3, title="Book Three", author="Author B", genre="Fiction")

    def test_find_by_id_missing(self, gateway):
        assert gateway.find_by_id(42) is None

    def test_list_all_ordered_by_id(self, gateway):
        assert [book.id for book in gateway.list_all()] == [1, 2, 3, 4, 5]

    def test_query_filters_sorts_and_windows(self, gateway):
        query = BookQuery(filters={"author": "author a"}, offset=0, limit=5)
        assert [book.title for book in gateway.query(query)] == ["Book One", "Book Two"]

        page = gateway.query(BookQuery(offset=2, limit=2))
        assert [book.title for book in page] == ["Book One", "Book Three"]

    def test_exists_is_exact(self, gateway):
        assert gateway.exists("Book One", "Author A", "Fiction")
        assert not gateway.exists("book one", "Author A", "Fiction")
        assert not gateway.exists("Book One", "Author A", "Science")

    def test_insert_assigns_next_id(self, gateway):
        created = gateway.insert(Book(title="New", author="Author E", genre="Poetry"))
        gateway.commit()

        assert created.id == 6
        assert gateway.find_by_id(6) == created

    def test_insert_ignores_client_id(self, gateway):
        created = gateway.insert(Book(id=1, title="New", author="E", genre="P"))
        assert created.id == 6
        assert gateway.find_by_id(1).title == "Book One"

    def test_remove(self, gateway):
        gateway.remove(gateway.find_by_id(2))
        gateway.commit()

        assert gateway.find_by_id(2) is None
        assert len(gateway.list_all()) == 4


class TestBookRepository:
    def test_insert_not_durable_until_commit(self, session: Session):
        repository = BookRepository(session)
        repository.insert(Book(title="Draft", author="A", genre="G"))
        session.rollback()

        assert repository.list_all() == []

    def test_commit_persists_rows(self, session: Session):
        repository = BookRepository(session)
        created = repository.insert(Book(title="Kept", author="A", genre="G"))
        repository.commit()

        row = session.exec(select(BookTable).where(BookTable.id == created.id)).one()
        assert (row.title, row.author, row.genre) == ("Kept", "A", "G")

    def test_remove_unknown_book_is_noop(self, seeded_repository: BookRepository):
        seeded_repository.remove(Book(id=99, title="x", author="y", genre="z"))
        seeded_repository.commit()
        assert len(seeded_repository.list_all()) == 5


class TestInMemoryBookRepository:
    def test_commit_is_counted(self):
        repository = InMemoryBookRepository()
        repository.commit()
        repository.commit()
        assert repository.commit_count == 2

    def test_returned_books_are_copies(self, sample_books):
        repository = InMemoryBookRepository(sample_books)
        book = repository.find_by_id(1)
        book.title = "Changed"
        assert repository.find_by_id(1).title == "Book One"

    def test_seeding_keeps_ids(self):
        repository = InMemoryBookRepository([Book(id=10, title="T", author="A", genre="G")])
        created = repository.insert(Book(title="U", author="A", genre="G"))
        assert created.id == 11
