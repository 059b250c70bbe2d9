"""In-memory account store with secondary indexes."""

import copy
import threading
from dataclasses import dataclass, field

from bank_accounts.exceptions import ConcurrencyConflictError
from bank_accounts.models.account import Account
from bank_accounts.models.enums import AccountType
from bank_accounts.store.base import AccountStore


@dataclass
class InMemoryAccountStore(AccountStore):
    """Dictionary-backed store.

    Records are copied on the way in and out so callers never share state
    with the store; concurrent writers see version conflicts instead of
    silently overwriting each other.
    """

    accounts: dict[str, Account] = field(default_factory=dict)

    # Secondary indexes
    _number_index: dict[str, str] = field(default_factory=dict)
    _customer_accounts: dict[str, list[str]] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def find_by_id(self, account_id: str) -> Account | None:
        with self._lock:
            account = self.accounts.get(account_id)
            return copy.deepcopy(account) if account is not None else None

    def find_by_account_number(self, account_number: str) -> Account | None:
        with self._lock:
            account_id = self._number_index.get(account_number)
            if account_id is None:
                return None
            return copy.deepcopy(self.accounts[account_id])

    def find_by_customer_id(self, customer_id: str) -> list[Account]:
        with self._lock:
            account_ids = self._customer_accounts.get(customer_id, [])
            return [copy.deepcopy(self.accounts[aid]) for aid in account_ids]

    def find_all(self) -> list[Account]:
        with self._lock:
            return [copy.deepcopy(a) for a in self.accounts.values()]

    def count_by_customer_id_and_account_type(
        self, customer_id: str, account_type: AccountType
    ) -> int:
        with self._lock:
            return sum(
                1
                for aid in self._customer_accounts.get(customer_id, [])
                if self.accounts[aid].account_type == account_type
            )

    def exists_by_account_number(self, account_number: str) -> bool:
        with self._lock:
            return account_number in self._number_index

    def save(self, account: Account) -> Account:
        with self._lock:
            stored = self.accounts.get(account.account_id)

            if account.version == 0:
                if stored is not None:
                    raise ConcurrencyConflictError(f"Account {account.account_id} already exists")
                if account.account_number in self._number_index:
                    raise ConcurrencyConflictError(
                        f"Account number {account.account_number} already exists"
                    )
            elif stored is None or stored.version != account.version:
                current = stored.version if stored is not None else None
                raise ConcurrencyConflictError(
                    f"Account {account.account_id} was modified concurrently "
                    f"(expected version {account.version}, found {current})"
                )

            account.version += 1
            self.accounts[account.account_id] = copy.deepcopy(account)
            self._number_index[account.account_number] = account.account_id
            customer_accounts = self._customer_accounts.setdefault(account.customer_id, [])
            if account.account_id not in customer_accounts:
                customer_accounts.append(account.account_id)
            return account

    def delete_by_id(self, account_id: str) -> bool:
        with self._lock:
            account = self.accounts.pop(account_id, None)
            if account is None:
                return False
            self._number_index.pop(account.account_number, None)
            customer_accounts = self._customer_accounts.get(account.customer_id, [])
            if account_id in customer_accounts:
                customer_accounts.remove(account_id)
            return True

    def summary(self) -> dict[str, int]:
        """Return account counts per type."""
        with self._lock:
            counts = {account_type.value: 0 for account_type in AccountType}
            for account in self.accounts.values():
                counts[account.account_type.value] += 1
            return counts
