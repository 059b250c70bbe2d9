"""Pytest configuration and fixtures."""

from datetime import datetime, timedelta

import pytest

from bank_accounts.customers import InMemoryCustomerDirectory
from bank_accounts.events import InMemoryEventPublisher
from bank_accounts.models import Customer, CustomerType
from bank_accounts.services import AccountService
from bank_accounts.store import InMemoryAccountStore


class FixedClock:
    """Controllable replacement for ``datetime.now``."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def clock() -> FixedClock:
    """Clock frozen mid-March 2025."""
    return FixedClock(datetime(2025, 3, 15, 10, 30))


@pytest.fixture
def personal_customer() -> Customer:
    return Customer(customer_id="cust-personal", customer_type=CustomerType.PERSONAL)


@pytest.fixture
def vip_customer() -> Customer:
    return Customer(customer_id="cust-vip", customer_type=CustomerType.PERSONAL_VIP, has_credit_card=True)


@pytest.fixture
def vip_customer_without_card() -> Customer:
    return Customer(customer_id="cust-vip-nocard", customer_type=CustomerType.PERSONAL_VIP)


@pytest.fixture
def business_customer() -> Customer:
    return Customer(
        customer_id="cust-business",
        customer_type=CustomerType.BUSINESS,
        business_name="Acme SAC",
    )


@pytest.fixture
def pyme_customer() -> Customer:
    return Customer(customer_id="cust-pyme", customer_type=CustomerType.BUSINESS_PYME, has_credit_card=True)


@pytest.fixture
def pyme_customer_without_card() -> Customer:
    return Customer(customer_id="cust-pyme-nocard", customer_type=CustomerType.BUSINESS_PYME)


@pytest.fixture
def store() -> InMemoryAccountStore:
    """Create a fresh store for each test."""
    return InMemoryAccountStore()


@pytest.fixture
def directory(
    personal_customer: Customer,
    vip_customer: Customer,
    vip_customer_without_card: Customer,
    business_customer: Customer,
    pyme_customer: Customer,
    pyme_customer_without_card: Customer,
) -> InMemoryCustomerDirectory:
    directory = InMemoryCustomerDirectory()
    for customer in (
        personal_customer,
        vip_customer,
        vip_customer_without_card,
        business_customer,
        pyme_customer,
        pyme_customer_without_card,
    ):
        directory.add_customer(customer)
    return directory


@pytest.fixture
def publisher() -> InMemoryEventPublisher:
    return InMemoryEventPublisher()


@pytest.fixture
def service(
    store: InMemoryAccountStore,
    directory: InMemoryCustomerDirectory,
    publisher: InMemoryEventPublisher,
    clock: FixedClock,
) -> AccountService:
    return AccountService(store=store, directory=directory, publisher=publisher, clock=clock)
