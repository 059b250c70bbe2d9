"""Account record with its monthly transaction-commission engine."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal

from bank_accounts.models.defaults import (
    DEFAULT_COMMISSION_PER_TRANSACTION,
    DEFAULT_FREE_TRANSACTIONS_PER_MONTH,
    TYPE_DEFAULTS,
)
from bank_accounts.models.enums import AccountType

ZERO = Decimal("0")


@dataclass
class Account:
    """Bank deposit account (passive product).

    Account types:
    - SAVING: no maintenance fee, capped monthly transactions
    - CHECKING: maintenance fee, unlimited transactions
    - FIXED_TERM: no maintenance fee, one movement day per month

    Two monthly counters are tracked independently:
    ``current_month_transactions`` feeds the hard cap
    (``max_monthly_transactions``) while ``current_month_transaction_count``
    feeds the free-transaction allowance used for commissions. The
    commission counter is scoped to the accounting period stored in
    ``last_transaction_month`` / ``last_transaction_year``.
    """

    account_id: str
    account_number: str
    account_type: AccountType
    customer_id: str
    balance: Decimal = ZERO
    maintenance_fee: Decimal | None = None
    max_monthly_transactions: int | None = None  # None = unlimited
    current_month_transactions: int = 0
    transaction_day: int | None = None  # 1-31, FIXED_TERM only
    holders: list[str] = field(default_factory=list)
    authorized_signers: list[str] = field(default_factory=list)
    minimum_opening_amount: Decimal = ZERO
    free_transactions_per_month: int = DEFAULT_FREE_TRANSACTIONS_PER_MONTH
    commission_per_transaction: Decimal = DEFAULT_COMMISSION_PER_TRANSACTION
    current_month_transaction_count: int = 0
    last_transaction_month: int | None = None  # 1-12
    last_transaction_year: int | None = None
    minimum_daily_average: Decimal | None = None  # VIP accounts only
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime | None = None
    version: int = 0

    def is_business_account(self) -> bool:
        """Check if the account has additional holders or signers."""
        return bool(self.holders) or bool(self.authorized_signers)

    def has_reached_transaction_limit(self) -> bool:
        """Check if the monthly transaction cap has been reached."""
        if self.max_monthly_transactions is None:
            return False
        return self.current_month_transactions >= self.max_monthly_transactions

    def has_free_transactions_available(self) -> bool:
        """Check if the next transaction falls inside the free allowance."""
        return self.current_month_transaction_count < self.free_transactions_per_month

    def next_transaction_commission(self) -> Decimal:
        """Commission for the next transaction.

        Assumes the stored period is current; price before calling
        :meth:`increment_transaction_count`.
        """
        if self.has_free_transactions_available():
            return ZERO
        return self.commission_per_transaction

    def increment_transaction_count(self, month: int, year: int) -> None:
        """Count one transaction in the (month, year) accounting period.

        The counter restarts from zero whenever the period changes.
        """
        self._roll_period(month, year)
        self.current_month_transaction_count += 1

    def reset_monthly_counter(self, now: datetime) -> None:
        """Zero the commission counter and stamp the period of ``now``."""
        self.current_month_transaction_count = 0
        self.last_transaction_month = now.month
        self.last_transaction_year = now.year
        self.updated_at = now

    def for_period(self, month: int, year: int) -> "Account":
        """Return a copy of this account as seen from (month, year)."""
        copy = replace(
            self,
            holders=list(self.holders),
            authorized_signers=list(self.authorized_signers),
        )
        copy._roll_period(month, year)
        return copy

    def apply_type_defaults(self) -> None:
        """Enforce the per-type fee, cap and transaction-day defaults."""
        (
            self.maintenance_fee,
            self.max_monthly_transactions,
            self.transaction_day,
        ) = TYPE_DEFAULTS[self.account_type].resolve(
            self.maintenance_fee,
            self.max_monthly_transactions,
            self.transaction_day,
        )

    def _roll_period(self, month: int, year: int) -> None:
        if self.last_transaction_month != month or self.last_transaction_year != year:
            self.current_month_transaction_count = 0
            self.last_transaction_month = month
            self.last_transaction_year = year
