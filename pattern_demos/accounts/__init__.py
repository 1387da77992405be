"""Bank account package."""

from pattern_demos.accounts.account import Account
from pattern_demos.accounts.interface import (
    AccountError,
    AccountInterface,
    InvalidOperationError,
    NegativeAmountError,
    OverdrawError,
)
from pattern_demos.accounts.secure import SecureAccount

__all__ = [
    "Account",
    "AccountError",
    "AccountInterface",
    "InvalidOperationError",
    "NegativeAmountError",
    "OverdrawError",
    "SecureAccount",
]
