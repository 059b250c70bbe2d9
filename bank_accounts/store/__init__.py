"""Account document stores."""

from bank_accounts.store.base import AccountStore
from bank_accounts.store.memory import InMemoryAccountStore

__all__ = ["AccountStore", "InMemoryAccountStore"]
