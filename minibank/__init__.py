"""
Minibank

A small banking model: checking and savings accounts held by a bank,
with status-gated deposits, withdrawals, check writing and interest.
Amounts are kept as Decimal throughout.
"""

from .accounts import Account, AccountStatus, CheckingAccount, SavingsAccount
from .bank import Bank
from .exceptions import (
    AccountClosedError,
    AccountInactiveError,
    AccountNotFoundError,
    AccountStateError,
    BankingError,
    DuplicateAccountError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidInterestRateError,
)

__version__ = "1.0.0"

__all__ = [
    "Account",
    "AccountClosedError",
    "AccountInactiveError",
    "AccountNotFoundError",
    "AccountStateError",
    "AccountStatus",
    "Bank",
    "BankingError",
    "CheckingAccount",
    "DuplicateAccountError",
    "InsufficientFundsError",
    "InvalidAmountError",
    "InvalidInterestRateError",
    "SavingsAccount",
]
