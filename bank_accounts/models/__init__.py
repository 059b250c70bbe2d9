"""Domain models for bank accounts."""

from bank_accounts.models.account import Account
from bank_accounts.models.base import EntityActionEvent
from bank_accounts.models.commission import CommissionQuote, CommissionReceipt
from bank_accounts.models.customer import Customer
from bank_accounts.models.defaults import TYPE_DEFAULTS, TypeDefaults, defaults_for
from bank_accounts.models.enums import AccountType, CustomerType, EventType
from bank_accounts.models.requests import AccountRequest, validate_request_fields

__all__ = [
    "TYPE_DEFAULTS",
    "Account",
    "AccountRequest",
    "AccountType",
    "CommissionQuote",
    "CommissionReceipt",
    "Customer",
    "CustomerType",
    "EntityActionEvent",
    "EventType",
    "TypeDefaults",
    "defaults_for",
    "validate_request_fields",
]
