"""
Data Models Package

This package contains the Pydantic models shared by the bank account
and library lending demos.
"""

from pattern_demos.models.book import (
    GENERAL_GENRE,
    Book,
    BookFactory,
    BookKind,
    LibraryError,
    NotAvailableError,
)
from pattern_demos.models.transaction import (
    MoneyInput,
    TransactionEvent,
    TransactionEventBuilder,
    TransactionKind,
    format_money,
    to_money,
)

__all__ = [
    # Book models
    "GENERAL_GENRE",
    "Book",
    "BookFactory",
    "BookKind",
    "LibraryError",
    "NotAvailableError",
    # Transaction models
    "MoneyInput",
    "TransactionEvent",
    "TransactionEventBuilder",
    "TransactionKind",
    "format_money",
    "to_money",
]
