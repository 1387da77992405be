"""
Book Models for the Library Lending Demo

A Book carries its own availability; the catalog and the lending
ledger only ever flip it through checkout() and return_book().
"""

from enum import Enum

import structlog
from pydantic import BaseModel, ConfigDict, Field


logger = structlog.get_logger(__name__)

GENERAL_GENRE = "General"


class LibraryError(Exception):
    """Base exception for catalog and lending operations."""
    pass


class NotAvailableError(LibraryError):
    """Checkout attempted on a book that is already checked out."""
    pass


class BookKind(str, Enum):
    """
    Book kinds the factory recognizes.

    Any kind outside this list is shelved under the General genre.
    """
    FICTION = "fiction"
    NON_FICTION = "non-fiction"
    MYSTERY = "mystery"
    ROMANCE = "romance"
    SCI_FI = "sci-fi"


class Book(BaseModel):
    """
    A single book in the catalog.

    Two books are the same book when title, author and genre match.
    Availability is state, not identity, so it is left out of equality
    and hashing and a held book stays findable in a set after checkout.
    """
    model_config = ConfigDict(str_strip_whitespace=True, validate_assignment=True)

    title: str = Field(..., min_length=1, description="Title, also the lookup key")
    author: str = Field(..., min_length=1)
    genre: str = Field(..., min_length=1, description="Genre bucket the book lives in")
    is_available: bool = Field(default=True)

    @property
    def key(self) -> tuple[str, str, str]:
        return (self.title, self.author, self.genre)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        status = "Available" if self.is_available else "Checked Out"
        return f"{self.title} by {self.author} ({self.genre}) - {status}"

    def checkout(self) -> None:
        """
        Mark the book as checked out.

        Raises:
            NotAvailableError: If the book is already checked out
        """
        if not self.is_available:
            logger.warning("checkout_rejected", title=self.title, reason="not_available")
            raise NotAvailableError(f"Book '{self.title}' is not available for checkout")
        self.is_available = False

    def return_book(self) -> None:
        """Mark the book as available again."""
        self.is_available = True


class BookFactory:
    """
    Creates books from a kind label.

    Usage:
        book = BookFactory.create_book("sci-fi", "Dune", "Frank Herbert", "Sci-Fi")
    """

    @staticmethod
    def create_book(kind: str, title: str, author: str, genre: str) -> Book:
        try:
            BookKind(kind.strip().lower())
        except ValueError:
            genre = GENERAL_GENRE
        return Book(title=title, author=author, genre=genre)
