"""Customer record as returned by the customer directory."""

from dataclasses import dataclass
from datetime import datetime

from bank_accounts.models.enums import CustomerType

PERSONAL_TYPES = frozenset({CustomerType.PERSONAL, CustomerType.PERSONAL_VIP})
BUSINESS_TYPES = frozenset({CustomerType.BUSINESS, CustomerType.BUSINESS_PYME})


@dataclass
class Customer:
    """Bank customer.

    Only ``customer_type`` and ``has_credit_card`` take part in account
    opening rules; the remaining fields are carried for display.
    """

    customer_id: str
    customer_type: CustomerType
    has_credit_card: bool = False
    document_number: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    business_name: str | None = None
    tax_id: str | None = None
    email: str | None = None
    phone_number: str | None = None
    address: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_personal(self) -> bool:
        return self.customer_type in PERSONAL_TYPES

    @property
    def is_business(self) -> bool:
        return self.customer_type in BUSINESS_TYPES

    @property
    def display_name(self) -> str:
        if self.is_business and self.business_name:
            return self.business_name
        parts = [p for p in (self.first_name, self.last_name) if p]
        return " ".join(parts) if parts else self.customer_id
