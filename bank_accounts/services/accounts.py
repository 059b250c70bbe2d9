"""Account service: opening, lookup, update, deletion and commissions."""

import logging
import uuid
from collections.abc import Callable
from datetime import datetime

from bank_accounts.customers.directory import CustomerDirectory
from bank_accounts.events.publisher import EventPublisher
from bank_accounts.exceptions import (
    AccountNotFoundError,
    ConcurrencyConflictError,
    CustomerNotFoundError,
)
from bank_accounts.logging import account_context
from bank_accounts.mapping import AccountMapper, generate_account_number
from bank_accounts.models.account import Account
from bank_accounts.models.base import EntityActionEvent
from bank_accounts.models.commission import CommissionQuote, CommissionReceipt
from bank_accounts.models.enums import EventType
from bank_accounts.models.requests import AccountRequest, validate_request_fields
from bank_accounts.rules.validator import AccountRuleValidator
from bank_accounts.serialization import to_dict
from bank_accounts.services.commission import CommissionService
from bank_accounts.store.base import AccountStore

logger = logging.getLogger(__name__)

ACCOUNT_NUMBER_ATTEMPTS = 5


class AccountService:
    """Implements the account business operations.

    Events are published only after the authoritative save succeeded.
    Publishing is best-effort: a failing publisher is logged and the
    operation still returns normally.
    """

    def __init__(
        self,
        store: AccountStore,
        directory: CustomerDirectory,
        publisher: EventPublisher,
        validator: AccountRuleValidator | None = None,
        mapper: AccountMapper | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.store = store
        self.directory = directory
        self.publisher = publisher
        self.validator = validator or AccountRuleValidator()
        self.mapper = mapper or AccountMapper()
        self.clock = clock
        self.commissions = CommissionService(store, clock=clock)

    # Opening

    def create(self, request: AccountRequest) -> Account:
        """Open a new account after validating the business rules.

        Raises
        ------
        InvalidRequestError
            If request fields are missing or out of range.
        CustomerNotFoundError
            If the customer id does not resolve.
        BusinessRuleViolationError
            If any account-opening rule rejects the request.
        """
        logger.debug("Creating account for customer: %s", request.customer_id)
        validate_request_fields(request)

        customer = self.directory.get_customer_by_id(request.customer_id)
        if customer is None:
            raise CustomerNotFoundError(request.customer_id)

        existing = 0
        if self.validator.needs_existing_count(request, customer):
            existing = self.store.count_by_customer_id_and_account_type(
                customer.customer_id, request.account_type
            )
        self.validator.validate(request, customer, existing_count=existing)

        account = self.mapper.to_entity(
            request, self.clock(), account_number=self._new_account_number()
        )
        saved = self.store.save(account)
        logger.info(
            "Account created successfully: %s",
            saved.account_number,
            extra=account_context(saved.account_id, account_type=saved.account_type.value),
        )

        self._publish(EventType.ACCOUNT_CREATED, saved)
        return saved

    def _new_account_number(self) -> str:
        for _ in range(ACCOUNT_NUMBER_ATTEMPTS):
            number = generate_account_number()
            if not self.store.exists_by_account_number(number):
                return number
            logger.warning("Account number collision: %s", number)
        raise ConcurrencyConflictError(
            f"Could not allocate a free account number after {ACCOUNT_NUMBER_ATTEMPTS} attempts"
        )

    # Lookup

    def get(self, account_id: str) -> Account:
        """Get account by ID."""
        logger.debug("Finding account by id: %s", account_id)
        account = self.store.find_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    def get_by_number(self, account_number: str) -> Account:
        """Get account by account number."""
        logger.debug("Finding account by account number: %s", account_number)
        account = self.store.find_by_account_number(account_number)
        if account is None:
            raise AccountNotFoundError(account_number, field="accountNumber")
        return account

    def list_by_customer(self, customer_id: str) -> list[Account]:
        """List all accounts of a customer (possibly empty)."""
        logger.debug("Finding accounts for customer: %s", customer_id)
        return self.store.find_by_customer_id(customer_id)

    def list_all(self) -> list[Account]:
        """List all accounts."""
        return self.store.find_all()

    # Mutation

    def update(self, account_id: str, request: AccountRequest) -> Account:
        """Update fee, limits, holders and signers of an account.

        Raises
        ------
        InvalidRequestError
            If request fields are out of range.
        AccountNotFoundError
            If the account does not exist.
        BusinessRuleViolationError
            If holders or signers are added to an account whose owner may
            not have them.
        """
        logger.debug("Updating account with id: %s", account_id)
        validate_request_fields(request, partial=True)

        account = self.get(account_id)
        if request.has_holders_or_signers:
            customer = self.directory.get_customer_by_id(account.customer_id)
            if customer is None:
                raise CustomerNotFoundError(account.customer_id)
            self.validator.validate_update(account.account_type, request, customer)
        self.mapper.update_entity(account, request, self.clock())
        saved = self.store.save(account)
        logger.info(
            "Account updated successfully with id: %s",
            account_id,
            extra=account_context(account_id, version=saved.version),
        )

        self._publish(EventType.ACCOUNT_UPDATED, saved)
        return saved

    def delete(self, account_id: str) -> None:
        """Delete an account.

        Raises
        ------
        AccountNotFoundError
            If the account does not exist. Nothing is published.
        """
        logger.debug("Deleting account with id: %s", account_id)
        account = self.get(account_id)
        if not self.store.delete_by_id(account_id):
            raise AccountNotFoundError(account_id)
        logger.info(
            "Account deleted successfully with id: %s", account_id, extra=account_context(account_id)
        )

        self._publish(EventType.ACCOUNT_DELETED, account)

    # Commissions

    def price_next_transaction(self, account_id: str) -> CommissionQuote:
        return self.commissions.price_next_transaction(account_id)

    def apply_transaction_commission(self, account_id: str) -> CommissionReceipt:
        return self.commissions.apply_transaction_commission(account_id)

    def reset_monthly_counter(self, account_id: str) -> Account:
        return self.commissions.reset_monthly_counter(account_id)

    # Events

    def _publish(self, event_type: EventType, account: Account) -> None:
        event = EntityActionEvent(
            event_id=str(uuid.uuid4()),
            event_type=event_type,
            entity_type=type(account).__name__,
            payload=to_dict(account),
            timestamp=self.clock(),
        )
        try:
            self.publisher.send_event(account.account_id, event)
        except Exception as e:
            # Publisher failures are logged, never raised to the caller
            logger.error(
                "Error publishing %s event for account %s: %s",
                event_type.value,
                account.account_id,
                e,
            )
            return
        logger.info("%s event published: %s", event_type.value, account.account_id)
