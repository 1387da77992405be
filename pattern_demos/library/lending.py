"""
Lending Ledger

A LibraryUser tracks the books they currently hold. A book enters the
held set only after its checkout succeeded and leaves it only when it
is returned.
"""

import structlog

from pattern_demos.models.book import Book, LibraryError


logger = structlog.get_logger(__name__)


class AlreadyHeldError(LibraryError):
    """User tried to borrow a book they already hold."""
    pass


class LibraryUser:
    """A library patron and the books they have checked out."""

    def __init__(self, name: str):
        self.name = name
        self._checked_out: set[Book] = set()

    @property
    def checked_out_books(self) -> set[Book]:
        """Copy of the held books; changing it does not affect the user."""
        return set(self._checked_out)

    def holds(self, book: Book) -> bool:
        return book in self._checked_out

    def borrow(self, book: Book) -> None:
        """
        Check a book out to this user.

        Raises:
            AlreadyHeldError: If this user already holds the book
            NotAvailableError: If someone else has it checked out
        """
        if book in self._checked_out:
            logger.warning("borrow_rejected", user=self.name, title=book.title, reason="already_held")
            raise AlreadyHeldError("You have already checked out this book")

        book.checkout()
        self._checked_out.add(book)
        logger.info("book_borrowed", user=self.name, title=book.title)

    def return_book(self, book: Book) -> bool:
        """
        Give a held book back to the library.

        Returns:
            True if the book was held and is now available again,
            False if this user did not hold it (nothing changes)
        """
        if book not in self._checked_out:
            return False

        self._checked_out.remove(book)
        book.return_book()
        logger.info("book_returned", user=self.name, title=book.title)
        return True
