"""Per-account-type defaults.

Each account type has one :class:`TypeDefaults` row. A row either forces a
value (``fixed_*``) or supplies one when the caller left it unset
(``default_*``). Only one of the monthly transaction cap and the
transaction day belongs to a type; the other is always cleared.
"""

from dataclasses import dataclass, replace
from decimal import Decimal

from bank_accounts.models.enums import AccountType
from bank_accounts.models.requests import AccountRequest

ACCOUNT_NUMBER_PREFIX = "ACC-"
DEFAULT_FREE_TRANSACTIONS_PER_MONTH = 5
DEFAULT_COMMISSION_PER_TRANSACTION = Decimal("2.00")


@dataclass(frozen=True)
class TypeDefaults:
    """Defaults enforced for one account type."""

    fixed_maintenance_fee: Decimal | None = None
    default_maintenance_fee: Decimal | None = None
    has_transaction_cap: bool = False
    default_max_monthly_transactions: int | None = None
    has_transaction_day: bool = False
    default_transaction_day: int | None = None

    def resolve(
        self,
        maintenance_fee: Decimal | None,
        max_monthly_transactions: int | None,
        transaction_day: int | None,
    ) -> tuple[Decimal | None, int | None, int | None]:
        """Return (maintenance_fee, max_monthly_transactions, transaction_day)."""
        if self.fixed_maintenance_fee is not None:
            maintenance_fee = self.fixed_maintenance_fee
        elif maintenance_fee is None:
            maintenance_fee = self.default_maintenance_fee

        if not self.has_transaction_cap:
            max_monthly_transactions = None
        elif max_monthly_transactions is None:
            max_monthly_transactions = self.default_max_monthly_transactions

        if not self.has_transaction_day:
            transaction_day = None
        elif transaction_day is None:
            transaction_day = self.default_transaction_day

        return maintenance_fee, max_monthly_transactions, transaction_day


TYPE_DEFAULTS: dict[AccountType, TypeDefaults] = {
    # Savings: no fee, limited transactions
    AccountType.SAVING: TypeDefaults(
        fixed_maintenance_fee=Decimal("0"),
        has_transaction_cap=True,
        default_max_monthly_transactions=5,
    ),
    # Checking: maintenance fee, unlimited transactions
    AccountType.CHECKING: TypeDefaults(
        default_maintenance_fee=Decimal("10.00"),
    ),
    # Fixed term: no fee, one movement per month on a fixed day
    AccountType.FIXED_TERM: TypeDefaults(
        fixed_maintenance_fee=Decimal("0"),
        has_transaction_day=True,
        default_transaction_day=1,
    ),
}


def defaults_for(account_type: AccountType, request: AccountRequest) -> AccountRequest:
    """Return a copy of ``request`` with the defaults of ``account_type`` applied.

    Parameters
    ----------
    account_type : AccountType
        Type whose defaults row is used.
    request : AccountRequest
        Partially filled request. It is not modified.

    Returns
    -------
    AccountRequest
        Request with maintenance fee, transaction cap, transaction day,
        free transactions and commission filled in.
    """
    fee, cap, day = TYPE_DEFAULTS[account_type].resolve(
        request.maintenance_fee,
        request.max_monthly_transactions,
        request.transaction_day,
    )
    return replace(
        request,
        account_type=account_type,
        maintenance_fee=fee,
        max_monthly_transactions=cap,
        transaction_day=day,
        initial_balance=request.initial_balance if request.initial_balance is not None else Decimal("0"),
        minimum_opening_amount=(
            request.minimum_opening_amount if request.minimum_opening_amount is not None else Decimal("0")
        ),
        free_transactions_per_month=(
            request.free_transactions_per_month
            if request.free_transactions_per_month is not None
            else DEFAULT_FREE_TRANSACTIONS_PER_MONTH
        ),
        commission_per_transaction=(
            request.commission_per_transaction
            if request.commission_per_transaction is not None
            else DEFAULT_COMMISSION_PER_TRANSACTION
        ),
        holders=list(request.holders or []),
        authorized_signers=list(request.authorized_signers or []),
    )
