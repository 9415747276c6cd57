"""
Bank Module

A named, ordered collection of accounts.
"""

from typing import Dict, Iterator, List, Optional

from .accounts import Account
from .config import BankConfig, get_config
from .exceptions import AccountNotFoundError, DuplicateAccountError
from .logging_config import get_logger, log_action


class Bank:
    """
    Holds accounts in insertion order

    Accounts are only ever added. Whether a repeated account id is rejected
    is controlled by BankConfig.enforce_unique_account_ids.

    The config covers the bank's own rules and logging only. Accounts read
    precision, fees and logging from the config they were created with, so
    pass the same BankConfig to them when they should share settings.
    """

    def __init__(self, name: str, config: Optional[BankConfig] = None):
        self.name = name
        self.config = config or get_config()
        self._accounts: List[Account] = []
        # First account seen for each id
        self._index: Dict[str, Account] = {}
        self.logger = get_logger("minibank.bank")

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(list(self._accounts))

    def __repr__(self) -> str:
        return f"Bank(name={self.name!r}, accounts={len(self._accounts)})"

    def add_account(self, account: Account) -> None:
        """
        Add an account to the bank

        Args:
            account: Account to add

        Raises:
            TypeError: If account is not an Account
            DuplicateAccountError: If the id is already held and ids are enforced unique
        """
        if not isinstance(account, Account):
            raise TypeError(f"Expected an Account, got {type(account).__name__}")

        if self.config.enforce_unique_account_ids and account.id in self._index:
            if self.config.enable_action_logging:
                log_action(
                    self.logger, "warning", f"Rejected duplicate account {account.id}",
                    action="add_account", resource=f"bank:{self.name}",
                    extra={"account_id": account.id}
                )
            raise DuplicateAccountError(
                f"Bank {self.name!r} already holds account {account.id}",
                account_id=account.id
            )

        self._accounts.append(account)
        self._index.setdefault(account.id, account)

        if self.config.enable_action_logging:
            log_action(
                self.logger, "info", f"Account added: {account.id}",
                action="add_account", resource=f"bank:{self.name}",
                extra={
                    "account_id": account.id,
                    "account_type": account.product_type,
                    "owner_name": account.owner_name,
                    "account_count": len(self._accounts)
                }
            )

    def get_accounts(self) -> List[Account]:
        """Get all accounts in insertion order (a copy of the collection)"""
        return list(self._accounts)

    def find_by_id(self, account_id: str) -> Optional[Account]:
        """Find the first account with the given id"""
        return self._index.get(account_id)

    def get_account(self, account_id: str) -> Account:
        """Get account by ID, raising if it is not held"""
        account = self.find_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(
                f"Account {account_id} not found in bank {self.name!r}",
                account_id=account_id
            )
        return account
