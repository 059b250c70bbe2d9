"""Wire an :class:`AccountService` from configuration."""

import logging

from bank_accounts.config import PUBLISHER_BACKENDS, STORE_BACKENDS, AccountServiceConfig
from bank_accounts.customers.directory import CustomerDirectory
from bank_accounts.customers.http import HttpCustomerDirectory
from bank_accounts.events.publisher import (
    ConsoleEventPublisher,
    EventPublisher,
    InMemoryEventPublisher,
)
from bank_accounts.exceptions import ConfigurationError
from bank_accounts.services.accounts import AccountService
from bank_accounts.store.base import AccountStore
from bank_accounts.store.memory import InMemoryAccountStore

logger = logging.getLogger(__name__)


def build_store(config: AccountServiceConfig) -> AccountStore:
    """Create the configured account store."""
    if config.store_backend == "memory":
        return InMemoryAccountStore()
    if config.store_backend == "postgres":
        from bank_accounts.store.postgres import PostgresAccountStore

        store = PostgresAccountStore(config.postgres)
        store.initialize_schema()
        return store
    raise ConfigurationError(
        f"Unknown store backend {config.store_backend!r}; expected one of {STORE_BACKENDS}"
    )


def build_publisher(config: AccountServiceConfig) -> EventPublisher:
    """Create the configured event publisher."""
    if config.publisher_backend == "console":
        return ConsoleEventPublisher(pretty=False)
    if config.publisher_backend == "memory":
        return InMemoryEventPublisher()
    if config.publisher_backend == "kafka":
        from bank_accounts.events.kafka import KafkaEventPublisher

        return KafkaEventPublisher(config.kafka)
    raise ConfigurationError(
        f"Unknown publisher backend {config.publisher_backend!r}; expected one of {PUBLISHER_BACKENDS}"
    )


def build_account_service(
    config: AccountServiceConfig | None = None,
    directory: CustomerDirectory | None = None,
) -> AccountService:
    """Build the account service.

    Parameters
    ----------
    config : AccountServiceConfig | None
        Configuration; read from the environment when omitted.
    directory : CustomerDirectory | None
        Customer directory; an HTTP client to the configured customer
        service when omitted.
    """
    config = config or AccountServiceConfig.from_env()
    store = build_store(config)
    publisher = build_publisher(config)
    directory = directory or HttpCustomerDirectory(config.customer_service)
    logger.info(
        "Account service ready: store=%s, publisher=%s",
        config.store_backend,
        config.publisher_backend,
    )
    return AccountService(store=store, directory=directory, publisher=publisher)
