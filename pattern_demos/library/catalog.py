"""
Library Catalog

Books are kept in genre buckets, each in insertion order until a sort
is explicitly requested for it. Genre keys match case-sensitively;
title lookup ignores case.
"""

from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

import structlog

from pattern_demos.library.sorting import SortStrategy
from pattern_demos.models.book import Book, LibraryError
from pattern_demos.services.storage import CatalogStorageInterface, FlatFileCatalogStorage


logger = structlog.get_logger(__name__)


class BookNotFoundError(LibraryError):
    """No book in the catalog has the requested title."""
    pass


class AvailableBooksIterator(Iterator[Book]):
    """
    Iterator over the books that were available when it was created.

    Membership is fixed at construction: checkouts and returns made
    while iterating neither add nor remove entries.
    """

    def __init__(self, books: Iterable[Book]):
        self._books = [book for book in books if book.is_available]
        self._index = 0

    def __iter__(self) -> "AvailableBooksIterator":
        return self

    def __next__(self) -> Book:
        if self._index >= len(self._books):
            raise StopIteration
        book = self._books[self._index]
        self._index += 1
        return book

    def __len__(self) -> int:
        return len(self._books) - self._index


class Catalog:
    """
    Genre-indexed book collection.

    Iterating the catalog itself yields the available books of the
    current genre, or of every genre when no current genre is set.
    """

    def __init__(self, sorting_strategy: SortStrategy = SortStrategy.TITLE):
        self._genres: dict[str, list[Book]] = {}
        self._sorting_strategy = sorting_strategy
        self._current_genre: Optional[str] = None

    def __len__(self) -> int:
        return sum(len(books) for books in self._genres.values())

    def __iter__(self) -> AvailableBooksIterator:
        if self._current_genre is not None:
            return self.genre_iterator(self._current_genre)
        return AvailableBooksIterator(self.all_books())

    @property
    def sorting_strategy(self) -> SortStrategy:
        return self._sorting_strategy

    @property
    def current_genre(self) -> Optional[str]:
        return self._current_genre

    @property
    def genres(self) -> list[str]:
        return list(self._genres)

    def set_sorting_strategy(self, strategy: SortStrategy) -> None:
        self._sorting_strategy = SortStrategy(strategy)

    def set_current_genre(self, genre: Optional[str]) -> None:
        self._current_genre = genre

    def add_book(self, book: Book) -> None:
        self._genres.setdefault(book.genre, []).append(book)

    def books_in_genre(self, genre: str) -> list[Book]:
        return list(self._genres.get(genre, []))

    def all_books(self) -> list[Book]:
        return [book for books in self._genres.values() for book in books]

    def find_book(self, title: str) -> Book:
        """
        Look up a book by title, ignoring case.

        Raises:
            BookNotFoundError: If no book has that title
        """
        wanted = title.casefold()
        for books in self._genres.values():
            for book in books:
                if book.title.casefold() == wanted:
                    return book

        logger.warning("book_not_found", title=title)
        raise BookNotFoundError(f"Book '{title}' not found in library")

    def genre_iterator(self, genre: str) -> AvailableBooksIterator:
        return AvailableBooksIterator(self._genres.get(genre, []))

    def sort_books_in_genre(self, genre: str) -> None:
        """Reorder one bucket by the active strategy. Unknown genres are ignored."""
        books = self._genres.get(genre)
        if books is not None:
            self._sorting_strategy.apply(books)

    def save_to_file(self, path: Union[str, Path]) -> int:
        """
        Write every book to a flat file.

        Returns:
            Number of books written

        Raises:
            StorageWriteError: If the file cannot be written
        """
        return self.save(FlatFileCatalogStorage(path))

    def load_from_file(self, path: Union[str, Path]) -> int:
        """
        Add every well-formed record in a flat file to the catalog.

        Returns:
            Number of books added

        Raises:
            StorageReadError: If the file cannot be read
        """
        return self.load(FlatFileCatalogStorage(path))

    def save(self, storage: CatalogStorageInterface) -> int:
        return storage.save(self.all_books())

    def load(self, storage: CatalogStorageInterface) -> int:
        books = storage.load()
        for book in books:
            self.add_book(book)
        return len(books)
