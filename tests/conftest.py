"""Shared fixtures for the pattern demo tests."""

import io

import pytest
from rich.console import Console

from pattern_demos.audit import TransactionObserver
from pattern_demos.library import Catalog
from pattern_demos.models import Book


class RecordingObserver(TransactionObserver):
    """Keeps every message it receives."""

    def __init__(self):
        self.messages: list[str] = []

    def receive(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def console() -> Console:
    """Console writing to memory; read it back with console.file.getvalue()."""
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def catalog() -> Catalog:
    catalog = Catalog()
    for title, author, genre in [
        ("To Kill a Mockingbird", "Harper Lee", "Fiction"),
        ("1984", "George Orwell", "Fiction"),
        ("Pride and Prejudice", "Jane Austen", "Fiction"),
        ("Gone Girl", "Gillian Flynn", "Mystery"),
        ("Dune", "Frank Herbert", "Sci-Fi"),
    ]:
        catalog.add_book(Book(title=title, author=author, genre=genre))
    return catalog
