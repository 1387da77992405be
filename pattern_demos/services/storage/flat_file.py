"""
Flat-File Catalog Storage

One book per line, UTF-8, no header:

    title,author,genre,true|false

Fields are not escaped, so a comma inside a field makes the line
unreadable on load. Lines that do not split into exactly four valid
fields are skipped.
"""

from pathlib import Path
from typing import Optional, Union

import structlog
from pydantic import ValidationError

from pattern_demos.models.book import Book, NotAvailableError
from pattern_demos.services.storage.interface import (
    CatalogStorageInterface,
    StorageReadError,
    StorageWriteError,
)


logger = structlog.get_logger(__name__)

FIELD_SEPARATOR = ","
FIELD_COUNT = 4


def book_to_line(book: Book) -> str:
    """Render a book as one record, without the line terminator."""
    available = "true" if book.is_available else "false"
    return FIELD_SEPARATOR.join([book.title, book.author, book.genre, available])


def line_to_book(line: str) -> Optional[Book]:
    """
    Parse one record.

    Returns None for a malformed line. A book stored as unavailable is
    created available and then checked out.
    """
    parts = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(parts) != FIELD_COUNT:
        return None
    title, author, genre, available = parts
    if not available.strip():
        return None
    try:
        book = Book(title=title, author=author, genre=genre)
    except ValidationError:
        return None

    if available.strip().lower() != "true":
        try:
            book.checkout()
        except NotAvailableError:
            pass  # fresh books are always available
    return book


class FlatFileCatalogStorage(CatalogStorageInterface):
    """Catalog storage backed by a single text file."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def save(self, books: list[Book]) -> int:
        try:
            with open(self._path, "w", encoding="utf-8") as handle:
                for book in books:
                    handle.write(book_to_line(book) + "\n")
        except OSError as e:
            logger.error("catalog_save_failed", path=str(self._path), error=str(e))
            raise StorageWriteError(f"Could not save catalog to {self._path}: {e}") from e

        logger.info("catalog_saved", path=str(self._path), count=len(books))
        return len(books)

    def load(self) -> list[Book]:
        try:
            with open(self._path, "r", encoding="utf-8") as handle:
                lines = handle.readlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("catalog_load_failed", path=str(self._path), error=str(e))
            raise StorageReadError(f"Could not load catalog from {self._path}: {e}") from e

        books = []
        for number, line in enumerate(lines, start=1):
            book = line_to_book(line)
            if book is None:
                logger.debug("catalog_line_skipped", path=str(self._path), line=number)
                continue
            books.append(book)

        logger.info("catalog_loaded", path=str(self._path), count=len(books))
        return books
