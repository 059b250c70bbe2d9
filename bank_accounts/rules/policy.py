"""Account-opening policy matrix.

One row per (customer type, account type). Adding a customer or account
type means adding rows here; the validator has no per-type branches.
"""

from dataclasses import dataclass

from bank_accounts.models.enums import AccountType, CustomerType

PERSONAL_DUPLICATE_REASON = "Personal customer can only have one {account_type} account"
PERSONAL_HOLDERS_REASON = "Personal customer accounts cannot have additional holders or signers"
BUSINESS_ONLY_CHECKING_REASON = "Business customers can only have CHECKING accounts"
VIP_SAVING_CARD_REASON = "VIP saving accounts require an active credit card"
PYME_CHECKING_CARD_REASON = "PYME checking accounts require an active credit card"


@dataclass(frozen=True)
class AccountPolicy:
    """What a customer type may do with an account type."""

    allowed: bool = True
    rejection_reason: str | None = None
    one_per_customer: bool = False
    duplicate_reason: str | None = None
    allow_holders: bool = True
    holders_reason: str | None = None
    requires_credit_card: bool = False
    credit_card_reason: str | None = None


_PERSONAL = AccountPolicy(
    one_per_customer=True,
    duplicate_reason=PERSONAL_DUPLICATE_REASON,
    allow_holders=False,
    holders_reason=PERSONAL_HOLDERS_REASON,
)
_PERSONAL_VIP_SAVING = AccountPolicy(
    one_per_customer=True,
    duplicate_reason=PERSONAL_DUPLICATE_REASON,
    allow_holders=False,
    holders_reason=PERSONAL_HOLDERS_REASON,
    requires_credit_card=True,
    credit_card_reason=VIP_SAVING_CARD_REASON,
)
_BUSINESS_DENIED = AccountPolicy(allowed=False, rejection_reason=BUSINESS_ONLY_CHECKING_REASON)
_BUSINESS_CHECKING = AccountPolicy()
_PYME_CHECKING = AccountPolicy(
    requires_credit_card=True,
    credit_card_reason=PYME_CHECKING_CARD_REASON,
)

POLICY_MATRIX: dict[tuple[CustomerType, AccountType], AccountPolicy] = {
    (CustomerType.PERSONAL, AccountType.SAVING): _PERSONAL,
    (CustomerType.PERSONAL, AccountType.CHECKING): _PERSONAL,
    (CustomerType.PERSONAL, AccountType.FIXED_TERM): _PERSONAL,
    (CustomerType.PERSONAL_VIP, AccountType.SAVING): _PERSONAL_VIP_SAVING,
    (CustomerType.PERSONAL_VIP, AccountType.CHECKING): _PERSONAL,
    (CustomerType.PERSONAL_VIP, AccountType.FIXED_TERM): _PERSONAL,
    (CustomerType.BUSINESS, AccountType.SAVING): _BUSINESS_DENIED,
    (CustomerType.BUSINESS, AccountType.CHECKING): _BUSINESS_CHECKING,
    (CustomerType.BUSINESS, AccountType.FIXED_TERM): _BUSINESS_DENIED,
    (CustomerType.BUSINESS_PYME, AccountType.SAVING): _BUSINESS_DENIED,
    (CustomerType.BUSINESS_PYME, AccountType.CHECKING): _PYME_CHECKING,
    (CustomerType.BUSINESS_PYME, AccountType.FIXED_TERM): _BUSINESS_DENIED,
}


def policy_for(
    customer_type: CustomerType,
    account_type: AccountType,
    matrix: dict[tuple[CustomerType, AccountType], AccountPolicy] = POLICY_MATRIX,
) -> AccountPolicy:
    """Look up the policy row, denying pairs the matrix does not list."""
    policy = matrix.get((customer_type, account_type))
    if policy is None:
        return AccountPolicy(
            allowed=False,
            rejection_reason=f"{customer_type.value} customers cannot open {account_type.value} accounts",
        )
    return policy
