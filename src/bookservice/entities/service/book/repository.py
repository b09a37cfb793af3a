"""Book repository backed by a SQLModel session."""

from sqlalchemy import func
from sqlmodel import Session, select

from .entity import Book
from .gateway import BookGateway
from .query import BookQuery
from .table import BookTable


class BookRepository(BookGateway):
    """Data-access layer for books.

    The repository never commits on its own; callers decide when staged
    inserts and deletes become durable via ``commit``.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_id(self, book_id: int) -> Book | None:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return None
        return Book.model_validate(row, from_attributes=True)

    def query(self, query: BookQuery) -> list[Book]:
        statement = select(BookTable)
        for name, value in query.filters.items():
            column = getattr(BookTable, name)
            statement = statement.where(func.lower(column) == value.lower())
        statement = statement.order_by(getattr(BookTable, query.order_by), BookTable.id)
        statement = statement.offset(query.offset)
        if query.limit is not None:
            statement = statement.limit(query.limit)
        rows = self._session.exec(statement).all()
        return [Book.model_validate(row, from_attributes=True) for row in rows]

    def exists(self, title: str, author: str, genre: str) -> bool:
        statement = (
            select(BookTable.id)
            .where(BookTable.title == title)
            .where(BookTable.author == author)
            .where(BookTable.genre == genre)
            .limit(1)
        )
        return self._session.exec(statement).first() is not None

    def list_all(self) -> list[Book]:
        rows = self._session.exec(select(BookTable).order_by(BookTable.id)).all()
        return [Book.model_validate(row, from_attributes=True) for row in rows]

    def insert(self, book: Book) -> Book:
        row = BookTable(title=book.title, author=book.author, genre=book.genre)
        self._session.add(row)
        # Flush so the database assigns the primary key.
        self._session.flush()
        return Book.model_validate(row, from_attributes=True)

    def remove(self, book: Book) -> None:
        row = self._session.get(BookTable, book.id)
        if row is not None:
            self._session.delete(row)

    def commit(self) -> None:
        self._session.commit()
