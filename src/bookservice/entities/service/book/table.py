"""Book database table model."""

from sqlmodel import Field, SQLModel


class BookTable(SQLModel, table=True):
    """Database persistence model for books.

    No unique constraint covers (title, author, genre); duplicates are
    rejected by the catalog handler before insert.
    """

    __tablename__ = "books"

    id: int | None = Field(default=None, primary_key=True)
    title: str
    author: str
    genre: str
