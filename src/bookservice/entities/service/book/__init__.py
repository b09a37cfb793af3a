"""Entity package: Book.

- entity.py: Domain model and the create request DTO
- table.py: Database persistence model
- query.py: Query object interpreted by gateways
- gateway.py: Persistence gateway interface
- repository.py: SQLModel-backed gateway
- memory.py: In-memory gateway
"""

from .entity import Book, CreateBookRequest
from .gateway import BookGateway
from .memory import InMemoryBookRepository
from .query import BOOK_FIELDS, BookQuery
from .repository import BookRepository
from .table import BookTable

__all__ = [
    "BOOK_FIELDS",
    "Book",
    "BookGateway",
    "BookQuery",
    "BookRepository",
    "BookTable",
    "CreateBookRequest",
    "InMemoryBookRepository",
]
