"""Seed an account service with synthetic customers and accounts.

Accounts are opened through :class:`~bank_accounts.services.AccountService`
so every opening rule applies; rejected requests are counted by reason.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from decimal import Decimal

from bank_accounts.customers.directory import InMemoryCustomerDirectory
from bank_accounts.events.publisher import EventPublisher
from bank_accounts.exceptions import BusinessRuleViolationError
from bank_accounts.generators import AccountRequestGenerator, CustomerGenerator
from bank_accounts.models.account import Account
from bank_accounts.models.customer import Customer
from bank_accounts.services.accounts import AccountService

logger = logging.getLogger(__name__)


@dataclass
class SeedResult:
    """Outcome of a seeding run."""

    customers: list[Customer] = field(default_factory=list)
    accounts: list[Account] = field(default_factory=list)
    rejections: Counter = field(default_factory=Counter)
    commissions: Decimal = Decimal("0")


def seed_customers(
    directory: InMemoryCustomerDirectory,
    num_customers: int,
    seed: int | None = None,
) -> list[Customer]:
    """Generate customers and register them in the directory."""
    generator = CustomerGenerator(seed=seed)
    customers = list(generator.generate_batch(num_customers))
    for customer in customers:
        directory.add_customer(customer)
    logger.info("Generated %d customers", len(customers))
    return customers


def open_accounts(
    service: AccountService,
    customers: list[Customer],
    seed: int | None = None,
) -> tuple[list[Account], Counter]:
    """Open accounts for every customer, collecting rejection reasons."""
    generator = AccountRequestGenerator(seed=seed)
    accounts = []
    rejections: Counter = Counter()

    for customer in customers:
        for request in generator.generate_for_customer(customer):
            try:
                accounts.append(service.create(request))
            except BusinessRuleViolationError as e:
                rejections[e.reason] += 1

    logger.info("Opened %d accounts (%d rejected)", len(accounts), sum(rejections.values()))
    return accounts, rejections


def run_transactions(service: AccountService, accounts: list[Account], per_account: int) -> Decimal:
    """Apply ``per_account`` commissioned transactions to every account."""
    total = Decimal("0")
    for account in accounts:
        for _ in range(per_account):
            total += service.apply_transaction_commission(account.account_id).commission
    return total


def run_seed(
    service: AccountService,
    directory: InMemoryCustomerDirectory,
    publisher: EventPublisher,
    num_customers: int,
    transactions_per_account: int,
    seed: int | None = None,
) -> SeedResult:
    """Seed customers, open their accounts and run transactions.

    The publisher is closed when the run ends, including a failed run, so
    queued events are flushed.
    """
    result = SeedResult()
    try:
        result.customers = seed_customers(directory, num_customers, seed)
        result.accounts, result.rejections = open_accounts(service, result.customers, seed)
        result.commissions = run_transactions(service, result.accounts, transactions_per_account)
    finally:
        publisher.close()
    return result
