"""
Abstract Storage Interface

Catalog persistence goes through this interface so the catalog never
touches files directly. The flat-file backend is the only one today;
tests can substitute an in-memory one.
"""

from abc import ABC, abstractmethod

from pattern_demos.models.book import Book


class CatalogStorageInterface(ABC):
    """
    Abstract interface for catalog storage operations.
    """

    @abstractmethod
    def save(self, books: list[Book]) -> int:
        """
        Replace the stored catalog with these books.

        Args:
            books: Every book, in the order it should be written

        Returns:
            Number of records written

        Raises:
            StorageWriteError: If the backend cannot be written
        """
        pass

    @abstractmethod
    def load(self) -> list[Book]:
        """
        Read every well-formed book record.

        Returns:
            Books in stored order, availability restored

        Raises:
            StorageReadError: If the backend cannot be read
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class StorageReadError(StorageError):
    """Stored catalog could not be read."""
    pass


class StorageWriteError(StorageError):
    """Catalog could not be written."""
    pass
