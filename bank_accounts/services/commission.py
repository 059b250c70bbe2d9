"""Service for managing account commissions and transaction counters."""

import logging
from collections.abc import Callable
from datetime import datetime

from bank_accounts.exceptions import AccountNotFoundError
from bank_accounts.logging import account_context
from bank_accounts.models.account import Account
from bank_accounts.models.commission import CommissionQuote, CommissionReceipt
from bank_accounts.store.base import AccountStore

logger = logging.getLogger(__name__)


class CommissionService:
    """Price, apply and reset the monthly transaction commission.

    Each operation is a single read-modify-write of one account; a
    concurrent write to the same account surfaces as
    :class:`~bank_accounts.exceptions.ConcurrencyConflictError` from the
    store.
    """

    def __init__(
        self,
        store: AccountStore,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.store = store
        self.clock = clock

    def _load(self, account_id: str) -> Account:
        account = self.store.find_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    def price_next_transaction(self, account_id: str) -> CommissionQuote:
        """Get the commission of the next transaction without applying it."""
        now = self.clock()
        account = self._load(account_id).for_period(now.month, now.year)
        return CommissionQuote(
            account_id=account_id,
            current_month_transaction_count=account.current_month_transaction_count,
            free_transactions_per_month=account.free_transactions_per_month,
            next_transaction_commission=account.next_transaction_commission(),
            has_free_transactions_available=account.has_free_transactions_available(),
        )

    def apply_transaction_commission(self, account_id: str) -> CommissionReceipt:
        """Count one transaction and return the commission it costs."""
        now = self.clock()
        account = self._load(account_id)

        # Roll into the current period first so the price reflects it,
        # then price before incrementing.
        priced = account.for_period(now.month, now.year)
        commission = priced.next_transaction_commission()
        account.increment_transaction_count(now.month, now.year)
        account.updated_at = now

        saved = self.store.save(account)
        logger.debug(
            "Account %s - Transactions this month: %d/%d, Commission: %s",
            account_id,
            saved.current_month_transaction_count,
            saved.free_transactions_per_month,
            commission,
        )
        return CommissionReceipt(
            account_id=account_id,
            commission=commission,
            current_month_transaction_count=saved.current_month_transaction_count,
            free_transactions_per_month=saved.free_transactions_per_month,
        )

    def reset_monthly_counter(self, account_id: str) -> Account:
        """Zero the commission counter of an account for the current month."""
        account = self._load(account_id)
        account.reset_monthly_counter(self.clock())
        saved = self.store.save(account)
        logger.info(
            "Monthly transaction counter reset for account %s",
            account_id,
            extra=account_context(
                account_id,
                month=saved.last_transaction_month,
                year=saved.last_transaction_year,
            ),
        )
        return saved
