"""Account open/update request."""

from dataclasses import dataclass
from decimal import Decimal

from bank_accounts.exceptions import InvalidRequestError
from bank_accounts.models.enums import AccountType


@dataclass
class AccountRequest:
    """Proposed account state sent by a caller.

    Every optional field left as ``None`` falls back to the account-type
    defaults (see :mod:`bank_accounts.models.defaults`) or to the record
    defaults of :class:`~bank_accounts.models.account.Account`.
    """

    account_type: AccountType
    customer_id: str
    initial_balance: Decimal | None = None
    maintenance_fee: Decimal | None = None
    max_monthly_transactions: int | None = None
    transaction_day: int | None = None
    holders: list[str] | None = None
    authorized_signers: list[str] | None = None
    minimum_opening_amount: Decimal | None = None
    free_transactions_per_month: int | None = None
    commission_per_transaction: Decimal | None = None
    minimum_daily_average: Decimal | None = None

    @property
    def has_holders_or_signers(self) -> bool:
        return bool(self.holders) or bool(self.authorized_signers)


_NON_NEGATIVE_AMOUNTS = (
    "initial_balance",
    "maintenance_fee",
    "minimum_opening_amount",
    "commission_per_transaction",
    "minimum_daily_average",
)


def validate_request_fields(request: AccountRequest, partial: bool = False) -> None:
    """Check field-level constraints of a request.

    With ``partial`` set (updates), account type and customer id are not
    required since they never change after opening.

    Raises
    ------
    InvalidRequestError
        Listing every violated constraint.
    """
    errors: list[str] = []

    if not partial:
        if not isinstance(request.account_type, AccountType):
            errors.append("Account type is required")
        if not request.customer_id or not request.customer_id.strip():
            errors.append("Customer ID is required")

    for name in _NON_NEGATIVE_AMOUNTS:
        value = getattr(request, name)
        if value is not None and value < 0:
            label = name.replace("_", " ").capitalize()
            errors.append(f"{label} must be zero or positive")

    if request.max_monthly_transactions is not None and request.max_monthly_transactions < 1:
        errors.append("Max monthly transactions must be at least 1")
    if request.transaction_day is not None and not 1 <= request.transaction_day <= 31:
        errors.append("Transaction day must be between 1 and 31")
    if request.free_transactions_per_month is not None and request.free_transactions_per_month < 0:
        errors.append("Free transactions per month must be zero or positive")

    if errors:
        raise InvalidRequestError(errors)
