"""
Secured Account Wrapper

SecureAccount decorates any AccountInterface with a per-withdrawal
ceiling. It owns no observers and no active flag of its own; those
live on the wrapped account. It keeps a balance mirror that is
refreshed from the wrapped account after every delegated call.
"""

from decimal import Decimal
from typing import Optional

import structlog

from pattern_demos.accounts.interface import AccountInterface, OverdrawError
from pattern_demos.audit.observer import TransactionObserver
from pattern_demos.config import get_settings
from pattern_demos.models.transaction import MoneyInput, format_money, to_money


logger = structlog.get_logger(__name__)


class SecureAccount(AccountInterface):
    """
    Account decorator enforcing a withdrawal ceiling.

    The ceiling check runs before the wrapped account is consulted,
    so an over-limit withdrawal fails even when the balance would cover it.
    The stored PIN does not gate anything here; verify_pin() is a
    standalone check for callers that want one.
    """

    def __init__(
        self,
        account: AccountInterface,
        pin: Optional[str] = None,
        withdrawal_limit: Optional[MoneyInput] = None,
    ):
        """
        Wrap an existing account.

        Args:
            account: The account every operation is delegated to
            pin: PIN for verify_pin(). Defaults to the configured PIN.
            withdrawal_limit: Per-withdrawal ceiling. Defaults to the configured limit.
        """
        settings = get_settings().bank
        self._account = account
        self._pin = pin if pin is not None else settings.default_pin
        self._withdrawal_limit = (
            to_money(withdrawal_limit) if withdrawal_limit is not None else settings.withdrawal_limit
        )
        self._balance = account.balance

    @property
    def account_number(self) -> str:
        return self._account.account_number

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def is_active(self) -> bool:
        return self._account.is_active

    @property
    def withdrawal_limit(self) -> Decimal:
        return self._withdrawal_limit

    def verify_pin(self, candidate: str) -> bool:
        return candidate == self._pin

    def add_observer(self, observer: TransactionObserver) -> None:
        self._account.add_observer(observer)

    def deposit(self, amount: MoneyInput) -> None:
        self._account.deposit(amount)
        self._balance = self._account.balance

    def withdraw(self, amount: MoneyInput) -> None:
        amount = to_money(amount)
        if amount > self._withdrawal_limit:
            logger.warning(
                "security_limit_exceeded",
                account_number=self.account_number,
                amount=str(amount),
                limit=str(self._withdrawal_limit),
            )
            raise OverdrawError(
                "Security limit exceeded. Maximum withdrawal per transaction: "
                f"${format_money(self._withdrawal_limit)}"
            )

        self._account.withdraw(amount)
        self._balance = self._account.balance

    def close(self) -> None:
        self._account.close()
        self._balance = self._account.balance
