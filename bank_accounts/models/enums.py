"""Enumeration types for the account domain."""

from enum import Enum


class AccountType(str, Enum):
    SAVING = "SAVING"
    CHECKING = "CHECKING"
    FIXED_TERM = "FIXED_TERM"


class CustomerType(str, Enum):
    PERSONAL = "PERSONAL"
    PERSONAL_VIP = "PERSONAL_VIP"
    BUSINESS = "BUSINESS"
    BUSINESS_PYME = "BUSINESS_PYME"


class EventType(str, Enum):
    ACCOUNT_CREATED = "ACCOUNT_CREATED"
    ACCOUNT_UPDATED = "ACCOUNT_UPDATED"
    ACCOUNT_DELETED = "ACCOUNT_DELETED"
