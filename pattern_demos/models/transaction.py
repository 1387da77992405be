"""
Transaction Models for the Bank Account Demo

Every balance change and every closure produces one TransactionEvent.
The event's message is what observers receive, so the wording here is
the wording written to the console and the transaction log.
"""

from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional, Union
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


MoneyInput = Union[Decimal, int, float, str]


def to_money(value: MoneyInput) -> Decimal:
    """
    Convert user or caller input into a Decimal amount.

    Floats go through str() so 0.1 stays 0.1 rather than its binary
    expansion.

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Not a valid amount: {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"Not a valid amount: {value!r}")
    return amount


def format_money(amount: Decimal) -> str:
    """
    Render an amount the way the console has always shown it.

    Whole amounts keep one decimal place (50 -> "50.0"), anything else
    drops trailing zeros (30.50 -> "30.5").
    """
    if amount == amount.to_integral_value():
        return f"{amount:.1f}"
    return f"{amount.normalize():f}"


class TransactionKind(str, Enum):
    """Kinds of account activity that observers hear about."""
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    CLOSURE = "closure"


class TransactionEvent(BaseModel):
    """
    A single account event.

    Built by the account after the state change has been applied,
    so `balance` is always the resulting balance.
    """

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the event occurred (UTC)"
    )
    kind: TransactionKind
    account_number: str = Field(..., min_length=1)
    amount: Optional[Decimal] = Field(
        default=None,
        description="Amount moved; None for closures"
    )
    balance: Decimal = Field(
        ...,
        description="Balance after the event"
    )

    @property
    def message(self) -> str:
        """Human-readable summary sent to observers."""
        if self.kind == TransactionKind.DEPOSIT:
            return (
                f"Deposited ${format_money(self.amount)} to account "
                f"{self.account_number}. New balance: ${format_money(self.balance)}"
            )
        if self.kind == TransactionKind.WITHDRAWAL:
            return (
                f"Withdrew ${format_money(self.amount)} from account "
                f"{self.account_number}. New balance: ${format_money(self.balance)}"
            )
        return f"Account {self.account_number} has been closed"

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "occurred_at": self.timestamp.isoformat(),
            "kind": self.kind.value,
            "account_number": self.account_number,
            "amount": str(self.amount) if self.amount is not None else None,
            "balance": str(self.balance),
        }


class TransactionEventBuilder:
    """
    Helper class to build transaction events.

    Usage:
        event = TransactionEventBuilder.deposit("123456", amount, balance)
        event = TransactionEventBuilder.closure("123456", balance)
    """

    @staticmethod
    def deposit(
        account_number: str,
        amount: Decimal,
        balance: Decimal,
    ) -> TransactionEvent:
        return TransactionEvent(
            kind=TransactionKind.DEPOSIT,
            account_number=account_number,
            amount=amount,
            balance=balance,
        )

    @staticmethod
    def withdrawal(
        account_number: str,
        amount: Decimal,
        balance: Decimal,
    ) -> TransactionEvent:
        return TransactionEvent(
            kind=TransactionKind.WITHDRAWAL,
            account_number=account_number,
            amount=amount,
            balance=balance,
        )

    @staticmethod
    def closure(account_number: str, balance: Decimal) -> TransactionEvent:
        return TransactionEvent(
            kind=TransactionKind.CLOSURE,
            account_number=account_number,
            balance=balance,
        )
