"""
Storage Services Package

Provides the abstract catalog storage interface and the flat-file
implementation used by the library demo.
"""

from pattern_demos.services.storage.interface import (
    CatalogStorageInterface,
    StorageError,
    StorageReadError,
    StorageWriteError,
)
from pattern_demos.services.storage.flat_file import (
    FlatFileCatalogStorage,
    book_to_line,
    line_to_book,
)

__all__ = [
    # Interfaces
    "CatalogStorageInterface",
    # Exceptions
    "StorageError",
    "StorageReadError",
    "StorageWriteError",
    # Flat-file implementation
    "FlatFileCatalogStorage",
    "book_to_line",
    "line_to_book",
]
