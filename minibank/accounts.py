"""
Account Management Module

Checking and savings accounts with status-gated balance operations.
Every mutating operation checks the account status first: INACTIVE accounts
can be reactivated, CLOSED accounts reject mutation permanently. Balances are
Decimal values rounded to the configured precision.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum
from typing import Optional

from .config import BankConfig, get_config
from .currency import AmountLike, format_amount, quantize, sum_amounts, to_amount
from .exceptions import (
    AccountClosedError,
    AccountInactiveError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidInterestRateError,
)
from .logging_config import get_logger, log_action


class AccountStatus(Enum):
    """Account lifecycle states"""
    ACTIVE = "active"      # Normal operation
    INACTIVE = "inactive"  # Suspended, can be reactivated
    CLOSED = "closed"      # Permanently closed


class Account(ABC):
    """
    Base bank account

    Holds the id, owner name, balance and status shared by every product.
    Subclasses add their own operations on top of deposit and withdraw.

    Precision, fees and action logging come from the config passed in,
    or from the global config when none is given.
    """

    def __init__(
        self,
        account_id: str,
        owner_name: str,
        balance: AmountLike,
        status: AccountStatus = AccountStatus.ACTIVE,
        config: Optional[BankConfig] = None
    ):
        if not isinstance(status, AccountStatus):
            raise ValueError(f"Unknown account status: {status!r}")

        self.config = config or get_config()
        self._precision = self.config.amount_precision
        self._id = account_id
        self.owner_name = owner_name
        self._balance = to_amount(balance, self._precision)
        self._status = status
        self.logger = get_logger("minibank.accounts")

    @property
    def id(self) -> str:
        return self._id

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def status(self) -> AccountStatus:
        return self._status

    @property
    @abstractmethod
    def product_type(self) -> str:
        """Short product name used in logs"""

    @property
    def resource(self) -> str:
        return f"account:{self._id}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id!r}, owner_name={self.owner_name!r}, "
            f"balance={self._balance!r}, status={self._status.name})"
        )

    def is_active(self) -> bool:
        """Check if account can process balance operations"""
        return self._status == AccountStatus.ACTIVE

    def get_balance(self) -> Decimal:
        """Get current balance"""
        return self._balance

    def deposit(self, amount: AmountLike) -> Decimal:
        """
        Deposit funds into the account

        Args:
            amount: Positive amount to add

        Returns:
            New balance

        Raises:
            AccountInactiveError: If the account is inactive
            AccountClosedError: If the account is closed
            InvalidAmountError: If amount is not positive
        """
        self._require_active("deposit")
        value = self._positive_amount(amount, "deposit")

        self._balance = self._adjusted_balance("deposit", value)
        self._log("deposit", f"Deposited {format_amount(value, self._precision)}", amount=value)
        return self._balance

    def withdraw(self, amount: AmountLike) -> Decimal:
        """
        Withdraw funds from the account

        Plain withdrawals never take the balance below zero.

        Args:
            amount: Positive amount to remove

        Returns:
            New balance

        Raises:
            AccountInactiveError: If the account is inactive
            AccountClosedError: If the account is closed
            InvalidAmountError: If amount is not positive
            InsufficientFundsError: If amount exceeds the balance
        """
        self._require_active("withdraw")
        value = self._positive_amount(amount, "withdraw")

        if value > self._balance:
            self._reject(
                "withdraw",
                f"Insufficient funds: available {format_amount(self._balance, self._precision)}, "
                f"requested {format_amount(value, self._precision)}"
            )
            raise InsufficientFundsError(
                f"Insufficient funds in account {self._id}: "
                f"available {format_amount(self._balance, self._precision)}, "
                f"requested {format_amount(value, self._precision)}",
                account_id=self._id
            )

        self._balance = self._adjusted_balance("withdraw", -value)
        self._log("withdraw", f"Withdrew {format_amount(value, self._precision)}", amount=value)
        return self._balance

    # Status transitions

    def activate(self) -> None:
        """Reactivate an inactive account"""
        self._require_not_closed("activate")
        self._set_status(AccountStatus.ACTIVE)

    def deactivate(self) -> None:
        """Suspend an active account"""
        self._require_not_closed("deactivate")
        self._set_status(AccountStatus.INACTIVE)

    def close(self) -> None:
        """Close the account permanently"""
        self._require_not_closed("close")
        self._set_status(AccountStatus.CLOSED)

    # Internal helpers

    def _set_status(self, new_status: AccountStatus) -> None:
        old_status = self._status
        if old_status == new_status:
            return

        self._status = new_status
        self._log(
            "status_change",
            f"Account status changed: {old_status.value} -> {new_status.value}",
            old_status=old_status.value,
            new_status=new_status.value
        )

    def _require_not_closed(self, operation: str) -> None:
        if self._status == AccountStatus.CLOSED:
            self._reject(operation, "Account is closed")
            raise AccountClosedError(
                f"Cannot {operation}: account {self._id} is closed",
                account_id=self._id
            )

    def _require_active(self, operation: str) -> None:
        """Status gate evaluated before any balance change"""
        self._require_not_closed(operation)
        if self._status == AccountStatus.INACTIVE:
            self._reject(operation, "Account is inactive")
            raise AccountInactiveError(
                f"Cannot {operation}: account {self._id} is inactive",
                account_id=self._id
            )

    def _positive_amount(self, amount: AmountLike, operation: str) -> Decimal:
        """Validate an operation amount; it must fit the precision exactly"""
        try:
            value = to_amount(amount, self._precision, exact=True)
        except InvalidAmountError as e:
            e.account_id = self._id
            self._reject(operation, str(e))
            raise

        if value <= Decimal('0'):
            self._reject(operation, f"Non-positive amount: {value}")
            raise InvalidAmountError(
                f"{operation.capitalize()} amount must be positive, got {value}",
                account_id=self._id
            )
        return value

    def _adjusted_balance(self, operation: str, *deltas: Decimal) -> Decimal:
        """Balance after applying deltas; the stored balance is not touched"""
        try:
            return sum_amounts(self._balance, *deltas, precision=self._precision)
        except InvalidAmountError as e:
            e.account_id = self._id
            self._reject(operation, str(e))
            raise

    def _log(self, action: str, message: str, **extra) -> None:
        if not self.config.enable_action_logging:
            return
        extra["account_type"] = self.product_type
        extra["balance"] = self._balance
        log_action(
            self.logger, "info", message,
            action=action, resource=self.resource, extra=extra
        )

    def _reject(self, action: str, reason: str) -> None:
        if not self.config.enable_action_logging:
            return
        log_action(
            self.logger, "warning", f"Rejected {action}: {reason}",
            action=action, resource=self.resource,
            extra={"status": self._status.value, "balance": self._balance}
        )


class CheckingAccount(Account):
    """
    Checking account with check writing

    A check larger than the balance is still honoured, but the account is
    charged a flat overdraft fee on top and the balance goes negative.
    """

    def __init__(
        self,
        account_id: str,
        owner_name: str,
        balance: AmountLike,
        status: AccountStatus = AccountStatus.ACTIVE,
        overdraft_fee: Optional[AmountLike] = None,
        config: Optional[BankConfig] = None
    ):
        super().__init__(account_id, owner_name, balance, status, config)

        if overdraft_fee is None:
            overdraft_fee = self.config.overdraft_fee_amount
        self._overdraft_fee = to_amount(overdraft_fee, self._precision)
        if self._overdraft_fee < Decimal('0'):
            raise InvalidAmountError("Overdraft fee must not be negative", account_id=account_id)

    @property
    def product_type(self) -> str:
        return "checking"

    @property
    def overdraft_fee(self) -> Decimal:
        return self._overdraft_fee

    def write_check(self, check_number: int, amount: AmountLike) -> Decimal:
        """
        Pay a check from the account

        Args:
            check_number: Check number, recorded in the log only
            amount: Positive check amount

        Returns:
            New balance
        """
        self._require_active("write_check")
        value = self._positive_amount(amount, "write_check")

        if value <= self._balance:
            self._balance = self._adjusted_balance("write_check", -value)
            self._log(
                "write_check", f"Check {check_number} paid",
                check_number=check_number, amount=value
            )
            return self._balance

        # Overdraft: pay the check and charge the fee
        self._balance = self._adjusted_balance("write_check", -value, -self._overdraft_fee)
        self._log(
            "write_check", f"Check {check_number} overdrew account",
            check_number=check_number, amount=value,
            overdraft_fee=self._overdraft_fee
        )
        return self._balance


class SavingsAccount(Account):
    """
    Savings account earning simple interest

    Each call to apply_interest credits balance * interest_rate.
    """

    def __init__(
        self,
        account_id: str,
        owner_name: str,
        balance: AmountLike,
        interest_rate: AmountLike,
        status: AccountStatus = AccountStatus.ACTIVE,
        config: Optional[BankConfig] = None
    ):
        super().__init__(account_id, owner_name, balance, status, config)

        if isinstance(interest_rate, bool):
            raise InvalidInterestRateError(
                f"Not an interest rate: {interest_rate!r}", account_id=account_id
            )
        try:
            rate = interest_rate if isinstance(interest_rate, Decimal) else Decimal(str(interest_rate))
        except ArithmeticError:
            raise InvalidInterestRateError(
                f"Not an interest rate: {interest_rate!r}", account_id=account_id
            ) from None

        if not rate.is_finite() or rate < Decimal('0') or rate >= Decimal('1'):
            raise InvalidInterestRateError(
                f"Interest rate must be in [0, 1), got {interest_rate}",
                account_id=account_id
            )
        self._interest_rate = rate

    @property
    def product_type(self) -> str:
        return "savings"

    @property
    def interest_rate(self) -> Decimal:
        return self._interest_rate

    def apply_interest(self) -> Decimal:
        """
        Credit one period of simple interest

        Returns:
            Interest credited (zero when the balance is not positive)
        """
        self._require_active("apply_interest")

        if self._balance <= Decimal('0'):
            return quantize(Decimal('0'), self._precision)

        interest = quantize(self._balance * self._interest_rate, self._precision)
        self._balance = self._adjusted_balance("apply_interest", interest)
        self._log(
            "apply_interest", f"Interest applied: {format_amount(interest, self._precision)}",
            interest=interest, interest_rate=self._interest_rate
        )
        return interest
