"""
Abstract Account Interface

Both the plain Account and the SecureAccount wrapper implement this
interface. The wrapper holds another AccountInterface and delegates to
it, so wrappers can be stacked without either one knowing the other's
concrete type.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from pattern_demos.audit.observer import TransactionObserver
from pattern_demos.models.transaction import MoneyInput


class AccountInterface(ABC):
    """
    Abstract interface for bank accounts.

    Any account implementation must implement these methods.
    """

    @property
    @abstractmethod
    def account_number(self) -> str:
        pass

    @property
    @abstractmethod
    def balance(self) -> Decimal:
        """Current balance. Reading it never changes anything."""
        pass

    @property
    @abstractmethod
    def is_active(self) -> bool:
        pass

    @abstractmethod
    def deposit(self, amount: MoneyInput) -> None:
        """
        Add money to the account.

        Raises:
            InvalidOperationError: If the account is closed
            NegativeAmountError: If amount is negative
        """
        pass

    @abstractmethod
    def withdraw(self, amount: MoneyInput) -> None:
        """
        Take money out of the account.

        Raises:
            InvalidOperationError: If the account is closed
            NegativeAmountError: If amount is negative
            OverdrawError: If amount exceeds what may be withdrawn
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the account. Closing a closed account does nothing."""
        pass

    @abstractmethod
    def add_observer(self, observer: TransactionObserver) -> None:
        """Register an observer; it is notified after earlier registrations."""
        pass


class AccountError(Exception):
    """Base exception for account operations."""
    pass


class NegativeAmountError(AccountError):
    """A negative amount was given where only non-negative amounts make sense."""
    pass


class OverdrawError(AccountError):
    """Withdrawal exceeds the balance or the per-transaction limit."""
    pass


class InvalidOperationError(AccountError):
    """Deposit or withdrawal attempted on a closed account."""
    pass
