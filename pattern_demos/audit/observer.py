"""
Observer interface for account notifications.

Anything that wants to hear about deposits, withdrawals and closures
implements receive(). Accounts call their observers in registration
order with the event's message text.
"""

from abc import ABC, abstractmethod


class TransactionObserver(ABC):
    """
    Abstract interface for account observers.

    Observers must not raise: a notification is best-effort and the
    account has already committed the change by the time it is sent.
    """

    @abstractmethod
    def receive(self, message: str) -> None:
        """
        Handle one notification.

        Args:
            message: Summary of what happened to the account
        """
        pass
