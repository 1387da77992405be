"""Sort orders the catalog can apply to a genre bucket."""

from enum import Enum
from operator import attrgetter
from typing import Callable

from pattern_demos.models.book import Book


class SortStrategy(str, Enum):
    """
    Ascending, case-sensitive order on one book field.

    list.sort is stable, so books with equal keys keep their relative order.
    """
    TITLE = "title"
    AUTHOR = "author"
    GENRE = "genre"

    @property
    def sort_key(self) -> Callable[[Book], str]:
        return attrgetter(self.value)

    def apply(self, books: list[Book]) -> None:
        """Reorder books in place."""
        books.sort(key=self.sort_key)
