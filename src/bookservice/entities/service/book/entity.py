"""Entity: Book."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """Book record as exposed by the catalog.

    ``id`` is assigned by the store on insert and never changes afterwards.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int | None = Field(default=None, description="Server-generated identifier")
    title: str = Field(description="Title")
    author: str = Field(description="Author")
    genre: str = Field(description="Genre")

    def same_record(self, title: str, author: str, genre: str) -> bool:
        """Exact, case-sensitive match on the uniqueness triple."""
        return (self.title, self.author, self.genre) == (title, author, genre)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Book):
            return False
        return (self.id, self.title, self.author, self.genre) == (
            other.id,
            other.title,
            other.author,
            other.genre,
        )

    def __hash__(self) -> int:
        return hash((self.id, self.title, self.author, self.genre))


class CreateBookRequest(BaseModel):
    """Payload for creating a book. Missing fields arrive as empty strings."""

    title: str = Field(default="", description="Title")
    author: str = Field(default="", description="Author")
    genre: str = Field(default="", description="Genre")

    def has_blank_field(self) -> bool:
        return any(not value.strip() for value in (self.title, self.author, self.genre))
