"""Customer directory clients."""

from bank_accounts.customers.directory import CustomerDirectory, InMemoryCustomerDirectory
from bank_accounts.customers.http import HttpCustomerDirectory

__all__ = ["CustomerDirectory", "HttpCustomerDirectory", "InMemoryCustomerDirectory"]
