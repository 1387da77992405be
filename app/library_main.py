"""
Console front-end for the library lending demo.

A numbered menu over one Catalog and one LibraryUser. Every engine
error is reported and the menu comes back; only option 8 or the end
of input leaves the loop.
"""

from typing import Optional, TextIO

from rich.console import Console

from app.console_io import Prompter
from pattern_demos.audit import configure_logging
from pattern_demos.config import get_settings
from pattern_demos.library import Catalog, LibraryUser, SortStrategy
from pattern_demos.models import BookFactory, LibraryError
from pattern_demos.services.storage import StorageError


# (kind, title, author, genre)
SAMPLE_BOOKS = [
    ("fiction", "To Kill a Mockingbird", "Harper Lee", "Fiction"),
    ("fiction", "1984", "George Orwell", "Fiction"),
    ("fiction", "Pride and Prejudice", "Jane Austen", "Fiction"),
    ("mystery", "The Girl with the Dragon Tattoo", "Stieg Larsson", "Mystery"),
    ("mystery", "Gone Girl", "Gillian Flynn", "Mystery"),
    ("sci-fi", "Dune", "Frank Herbert", "Sci-Fi"),
    ("sci-fi", "The Hitchhiker's Guide to the Galaxy", "Douglas Adams", "Sci-Fi"),
    ("non-fiction", "Sapiens", "Yuval Noah Harari", "Non-Fiction"),
    ("non-fiction", "Educated", "Tara Westover", "Non-Fiction"),
    ("romance", "The Notebook", "Nicholas Sparks", "Romance"),
    ("romance", "Me Before You", "Jojo Moyes", "Romance"),
]

MENU = """
=== Library Menu ===
1. Browse books by genre
2. Checkout a book
3. Return a book
4. View your checked out books
5. Change sorting preference
6. Save library state
7. Load library state
8. Exit"""

SORT_CHOICES = {
    1: SortStrategy.TITLE,
    2: SortStrategy.AUTHOR,
    3: SortStrategy.GENRE,
}


def seed_catalog(catalog: Catalog) -> None:
    for kind, title, author, genre in SAMPLE_BOOKS:
        catalog.add_book(BookFactory.create_book(kind, title, author, genre))


class LibraryShell:
    """Interactive menu loop for one user session."""

    def __init__(self, catalog: Catalog, prompter: Prompter):
        self.catalog = catalog
        self.prompter = prompter
        self.user: Optional[LibraryUser] = None
        self._state_file = get_settings().library.default_state_file

    def run(self) -> int:
        say = self.prompter.say
        say("Welcome to the Digital Library System!")
        try:
            self.user = LibraryUser(self.prompter.ask("Enter your name: "))
            while True:
                say(MENU)
                choice = self.prompter.ask_int("Choose an option: ")
                if choice is None:
                    say("Invalid input. Please enter a number.")
                    continue
                if choice == 8:
                    say("Thank you for using the Digital Library System!")
                    return 0
                self.dispatch(choice)
        except EOFError:
            say("Input ended.")
            return 0

    def dispatch(self, choice: int) -> None:
        actions = {
            1: self.browse_by_genre,
            2: self.checkout_book,
            3: self.return_book,
            4: self.view_checked_out_books,
            5: self.change_sorting,
            6: self.save_state,
            7: self.load_state,
        }
        action = actions.get(choice)
        if action is None:
            self.prompter.say("Invalid choice. Please try again.")
            return
        try:
            action()
        except (LibraryError, StorageError) as e:
            self.prompter.say(f"Error: {e}")

    def browse_by_genre(self) -> None:
        say = self.prompter.say
        say("")
        say("Available genres:")
        for genre in self.catalog.genres:
            say(f"- {genre}")

        genre = self.prompter.ask("Enter genre to browse: ")
        self.catalog.sort_books_in_genre(genre)
        say("")
        say(f"Available books in {genre}:")
        books = list(self.catalog.genre_iterator(genre))
        for book in books:
            say(f"- {book}")
        if not books:
            say("No available books in this genre.")

    def checkout_book(self) -> None:
        title = self.prompter.ask("Enter the title of the book to checkout: ")
        book = self.catalog.find_book(title)
        self.user.borrow(book)
        self.prompter.say(f"{self.user.name} successfully checked out: {book.title}")

    def return_book(self) -> None:
        say = self.prompter.say
        held = self.user.checked_out_books
        if not held:
            say("You have no books checked out.")
            return

        say("Your checked out books:")
        for book in sorted(held, key=SortStrategy.TITLE.sort_key):
            say(f"- {book.title}")

        title = self.prompter.ask("Enter the title of the book to return: ")
        book = self.catalog.find_book(title)
        if self.user.return_book(book):
            say(f"{self.user.name} successfully returned: {book.title}")
        else:
            say("You don't have this book checked out")

    def view_checked_out_books(self) -> None:
        say = self.prompter.say
        held = self.user.checked_out_books
        if not held:
            say("You have no books checked out.")
            return
        say("")
        say("Your checked out books:")
        for book in sorted(held, key=SortStrategy.TITLE.sort_key):
            say(f"- {book}")

    def change_sorting(self) -> None:
        say = self.prompter.say
        say("Choose sorting preference:")
        say("1. Sort by Title")
        say("2. Sort by Author")
        say("3. Sort by Genre")
        strategy = SORT_CHOICES.get(self.prompter.ask_int("Enter choice: "))
        if strategy is None:
            say("Invalid choice")
            return
        self.catalog.set_sorting_strategy(strategy)
        say(f"Sorting preference set to {strategy.value.capitalize()}")

    def save_state(self) -> None:
        filename = self._ask_filename("save")
        self.catalog.save_to_file(filename)
        self.prompter.say(f"Library state saved successfully to {filename}")

    def load_state(self) -> None:
        filename = self._ask_filename("load")
        self.catalog.load_from_file(filename)
        self.prompter.say(f"Library state loaded successfully from {filename}")

    def _ask_filename(self, verb: str) -> str:
        answer = self.prompter.ask(
            f"Enter filename to {verb} library state [{self._state_file}]: "
        )
        return answer or self._state_file


def run(
    console: Optional[Console] = None,
    stream: Optional[TextIO] = None,
    catalog: Optional[Catalog] = None,
) -> int:
    """
    Run one interactive session.

    Returns:
        Process exit code
    """
    if catalog is None:
        catalog = Catalog()
        if get_settings().library.seed_sample_books:
            seed_catalog(catalog)
    shell = LibraryShell(catalog, Prompter(console or Console(), stream))
    return shell.run()


def main() -> None:
    configure_logging()
    raise SystemExit(run())


if __name__ == "__main__":
    main()
