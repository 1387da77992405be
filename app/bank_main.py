"""
Console front-end for the bank account demo.

Opens one account, wraps it in a SecureAccount, runs a deposit and a
withdrawal from user input, then walks through each error case.
"""

from pathlib import Path
from typing import Optional, TextIO, Union

from rich.console import Console

from app.console_io import Prompter
from pattern_demos.accounts import (
    Account,
    AccountError,
    NegativeAmountError,
    SecureAccount,
)
from pattern_demos.audit import TransactionLogger, configure_logging
from pattern_demos.config import get_settings
from pattern_demos.models import format_money


def _open_account(prompter: Prompter, account_number: str) -> Account:
    while True:
        initial_balance = prompter.ask_amount("Enter initial balance: ")
        try:
            return Account(account_number, initial_balance)
        except NegativeAmountError as e:
            prompter.say(f"Error: {e}")


def _attempt(prompter: Prompter, action, *args) -> None:
    try:
        action(*args)
    except AccountError as e:
        prompter.say(f"Caught exception: {e}")


def run(
    console: Optional[Console] = None,
    stream: Optional[TextIO] = None,
    log_path: Optional[Union[str, Path]] = None,
) -> int:
    """
    Run the demo once.

    Returns:
        Process exit code
    """
    console = console or Console()
    prompter = Prompter(console, stream)
    settings = get_settings().bank

    try:
        account = _open_account(prompter, settings.account_number)
        prompter.say(f"Bank Account Created: #{account.account_number}")

        account.add_observer(TransactionLogger(log_path=log_path, console=console))
        secure_account = SecureAccount(account)

        deposit_amount = prompter.ask_amount("Enter deposit amount: ")
        _attempt(prompter, secure_account.deposit, deposit_amount)

        withdrawal_amount = prompter.ask_amount("Enter withdrawal amount: ")
        _attempt(prompter, secure_account.withdraw, withdrawal_amount)
    except EOFError:
        prompter.say("Input ended.")
        return 1

    prompter.say(f"Final balance: ${format_money(secure_account.balance)}")

    prompter.say("")
    prompter.say("--- Testing Exception Handling ---")
    _attempt(prompter, secure_account.deposit, -50)
    _attempt(prompter, secure_account.withdraw, secure_account.balance + 100)
    _attempt(prompter, secure_account.withdraw, 600)
    secure_account.close()
    _attempt(prompter, secure_account.deposit, 100)
    return 0


def main() -> None:
    configure_logging()
    raise SystemExit(run())


if __name__ == "__main__":
    main()
