"""Customer directory port and in-memory implementation."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from bank_accounts.models.customer import Customer


class CustomerDirectory(ABC):
    """Read-only access to customer records owned by another service."""

    @abstractmethod
    def get_customer_by_id(self, customer_id: str) -> Customer | None:
        """Get a customer, or None if the id is unknown."""


@dataclass
class InMemoryCustomerDirectory(CustomerDirectory):
    """Directory backed by a dictionary, for seeding and tests."""

    customers: dict[str, Customer] = field(default_factory=dict)

    def add_customer(self, customer: Customer) -> None:
        """Add or replace a customer."""
        self.customers[customer.customer_id] = customer

    def get_customer_by_id(self, customer_id: str) -> Customer | None:
        return self.customers.get(customer_id)
