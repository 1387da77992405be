"""Library lending package."""

from pattern_demos.library.catalog import AvailableBooksIterator, BookNotFoundError, Catalog
from pattern_demos.library.lending import AlreadyHeldError, LibraryUser
from pattern_demos.library.sorting import SortStrategy

__all__ = [
    "AlreadyHeldError",
    "AvailableBooksIterator",
    "BookNotFoundError",
    "Catalog",
    "LibraryUser",
    "SortStrategy",
]
