"""
Bank Account

The Account is the subject observers watch. Its balance moves only
through deposit() and withdraw(), never below zero, and not at all
once the account is closed.
"""

from decimal import Decimal

import structlog

from pattern_demos.accounts.interface import (
    AccountInterface,
    InvalidOperationError,
    NegativeAmountError,
    OverdrawError,
)
from pattern_demos.audit.observer import TransactionObserver
from pattern_demos.models.transaction import (
    MoneyInput,
    TransactionEvent,
    TransactionEventBuilder,
    format_money,
    to_money,
)


logger = structlog.get_logger(__name__)


class Account(AccountInterface):
    """
    A bank account with observer notifications.

    Checks run before any state changes, so a rejected call leaves the
    balance, the active flag and the observers untouched.
    """

    def __init__(self, account_number: str, initial_balance: MoneyInput = Decimal("0")):
        """
        Open an account.

        Args:
            account_number: Identifier shown in every notification
            initial_balance: Opening balance, must not be negative

        Raises:
            InvalidOperationError: If account_number is empty or blank
            NegativeAmountError: If initial_balance is negative
        """
        if not account_number or not account_number.strip():
            raise InvalidOperationError("Account number must not be empty")
        balance = to_money(initial_balance)
        if balance < 0:
            raise NegativeAmountError(
                f"Cannot open an account with a negative balance: ${format_money(balance)}"
            )
        self._account_number = account_number
        self._balance = balance
        self._is_active = True
        self._observers: list[TransactionObserver] = []

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def is_active(self) -> bool:
        return self._is_active

    def add_observer(self, observer: TransactionObserver) -> None:
        self._observers.append(observer)

    def _notify(self, event: TransactionEvent) -> None:
        logger.info("account_event", **event.to_log_dict())
        for observer in self._observers:
            try:
                observer.receive(event.message)
            except Exception as e:
                # A failing observer does not stop delivery to the rest
                logger.error(
                    "observer_failed",
                    observer=type(observer).__name__,
                    account_number=self._account_number,
                    error=str(e),
                )

    def _reject(self, error: Exception, operation: str, amount: Decimal) -> Exception:
        logger.warning(
            "account_operation_rejected",
            operation=operation,
            account_number=self._account_number,
            amount=str(amount),
            reason=str(error),
        )
        return error

    def deposit(self, amount: MoneyInput) -> None:
        amount = to_money(amount)
        if not self._is_active:
            raise self._reject(
                InvalidOperationError("Cannot deposit to a closed account"), "deposit", amount
            )
        if amount < 0:
            raise self._reject(
                NegativeAmountError(f"Cannot deposit negative amount: ${format_money(amount)}"),
                "deposit",
                amount,
            )

        event = TransactionEventBuilder.deposit(self._account_number, amount, self._balance + amount)
        self._balance = event.balance
        self._notify(event)

    def withdraw(self, amount: MoneyInput) -> None:
        amount = to_money(amount)
        if not self._is_active:
            raise self._reject(
                InvalidOperationError("Cannot withdraw from a closed account"), "withdraw", amount
            )
        if amount < 0:
            raise self._reject(
                NegativeAmountError(f"Cannot withdraw negative amount: ${format_money(amount)}"),
                "withdraw",
                amount,
            )
        if amount > self._balance:
            raise self._reject(
                OverdrawError(
                    f"Insufficient funds. Balance: ${format_money(self._balance)}, "
                    f"Withdrawal: ${format_money(amount)}"
                ),
                "withdraw",
                amount,
            )

        event = TransactionEventBuilder.withdrawal(self._account_number, amount, self._balance - amount)
        self._balance = event.balance
        self._notify(event)

    def close(self) -> None:
        if not self._is_active:
            return
        event = TransactionEventBuilder.closure(self._account_number, self._balance)
        self._is_active = False
        self._notify(event)
