"""Commission quote and receipt returned by commission operations."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class CommissionQuote:
    """Price of the next transaction, without applying it."""

    account_id: str
    current_month_transaction_count: int
    free_transactions_per_month: int
    next_transaction_commission: Decimal
    has_free_transactions_available: bool


@dataclass(frozen=True)
class CommissionReceipt:
    """Commission charged for a transaction that was just counted."""

    account_id: str
    commission: Decimal
    current_month_transaction_count: int
    free_transactions_per_month: int
