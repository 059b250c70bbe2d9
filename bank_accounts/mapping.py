"""Conversion from account requests to account records."""

import uuid
from datetime import datetime

from bank_accounts.models.account import Account
from bank_accounts.models.defaults import ACCOUNT_NUMBER_PREFIX, defaults_for
from bank_accounts.models.requests import AccountRequest


def generate_account_number() -> str:
    """Generate an account number: ``ACC-`` + 10 uppercase hex characters."""
    return ACCOUNT_NUMBER_PREFIX + uuid.uuid4().hex[:10].upper()


class AccountMapper:
    """Build and update :class:`Account` records from requests."""

    def to_entity(
        self,
        request: AccountRequest,
        now: datetime,
        account_number: str | None = None,
    ) -> Account:
        """Create a new, unsaved account from a validated request.

        The commission period starts at ``now``'s month so the first
        transaction of the month is not mistaken for a period change.
        """
        full = defaults_for(request.account_type, request)
        return Account(
            account_id=str(uuid.uuid4()),
            account_number=account_number or generate_account_number(),
            account_type=full.account_type,
            customer_id=full.customer_id,
            balance=full.initial_balance,
            maintenance_fee=full.maintenance_fee,
            max_monthly_transactions=full.max_monthly_transactions,
            current_month_transactions=0,
            transaction_day=full.transaction_day,
            holders=full.holders,
            authorized_signers=full.authorized_signers,
            minimum_opening_amount=full.minimum_opening_amount,
            free_transactions_per_month=full.free_transactions_per_month,
            commission_per_transaction=full.commission_per_transaction,
            current_month_transaction_count=0,
            last_transaction_month=now.month,
            last_transaction_year=now.year,
            minimum_daily_average=full.minimum_daily_average,
            created_at=now,
        )

    def update_entity(self, account: Account, request: AccountRequest, now: datetime) -> None:
        """Apply an update request to an existing account in place.

        Fee, cap and transaction day are replaced outright (type defaults
        then fill the gaps). Holders, signers and commission terms change
        only when the request carries them. Type and owner never change.
        """
        account.maintenance_fee = request.maintenance_fee
        account.max_monthly_transactions = request.max_monthly_transactions
        account.transaction_day = request.transaction_day
        if request.holders is not None:
            account.holders = list(request.holders)
        if request.authorized_signers is not None:
            account.authorized_signers = list(request.authorized_signers)
        if request.free_transactions_per_month is not None:
            account.free_transactions_per_month = request.free_transactions_per_month
        if request.commission_per_transaction is not None:
            account.commission_per_transaction = request.commission_per_transaction
        account.apply_type_defaults()
        account.updated_at = now
