"""
Banking Exceptions Module

Domain errors raised by account and bank operations. Callers can catch
BankingError for everything, or the specific subclasses to tell an inactive
account (recoverable) from a closed one (permanent).
"""

from typing import Optional


class BankingError(Exception):
    """Base exception for all minibank errors"""

    def __init__(self, message: str, account_id: Optional[str] = None):
        super().__init__(message)
        self.account_id = account_id


class AccountStateError(BankingError):
    """Raised when an account's status does not allow the operation"""


class AccountInactiveError(AccountStateError):
    """Raised when a mutating operation hits an INACTIVE account"""


class AccountClosedError(AccountStateError):
    """Raised when a mutating operation hits a CLOSED account"""


class InvalidAmountError(BankingError, ValueError):
    """Raised when an amount is not a positive, finite number"""


class InvalidInterestRateError(BankingError, ValueError):
    """Raised when an interest rate falls outside [0, 1)"""


class InsufficientFundsError(BankingError):
    """Raised when a withdrawal exceeds the available balance"""


class DuplicateAccountError(BankingError):
    """Raised when a bank already holds an account with the same id"""


class AccountNotFoundError(BankingError, KeyError):
    """Raised when an account id is not held by the bank"""

    def __str__(self) -> str:
        # KeyError would otherwise quote the message
        return str(self.args[0]) if self.args else ""
