"""Abstract account document store."""

from abc import ABC, abstractmethod

from bank_accounts.models.account import Account
from bank_accounts.models.enums import AccountType


class AccountStore(ABC):
    """Persistence port for account records.

    Records carry an optimistic-concurrency ``version``. A record with
    version 0 has never been saved and is inserted; any other version must
    match the stored one. Every successful save increments the version.
    """

    @abstractmethod
    def find_by_id(self, account_id: str) -> Account | None:
        """Get account by ID."""

    @abstractmethod
    def find_by_account_number(self, account_number: str) -> Account | None:
        """Get account by account number."""

    @abstractmethod
    def find_by_customer_id(self, customer_id: str) -> list[Account]:
        """List the accounts owned by a customer."""

    @abstractmethod
    def find_all(self) -> list[Account]:
        """List all accounts."""

    @abstractmethod
    def count_by_customer_id_and_account_type(
        self, customer_id: str, account_type: AccountType
    ) -> int:
        """Count a customer's accounts of one type."""

    @abstractmethod
    def exists_by_account_number(self, account_number: str) -> bool:
        """Check whether an account number is taken."""

    @abstractmethod
    def save(self, account: Account) -> Account:
        """Insert or update an account.

        Returns
        -------
        Account
            The saved record, with its new version.

        Raises
        ------
        ConcurrencyConflictError
            If the stored version differs from ``account.version`` or a
            new record reuses an existing id or account number.
        """

    @abstractmethod
    def delete_by_id(self, account_id: str) -> bool:
        """Delete an account. Returns False if it did not exist."""
