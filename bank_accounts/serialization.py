"""Shared serialization utilities for stores, publishers and clients."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from bank_accounts.models.account import Account
from bank_accounts.models.customer import Customer
from bank_accounts.models.enums import AccountType, CustomerType

_ACCOUNT_DECIMALS = (
    "balance",
    "maintenance_fee",
    "minimum_opening_amount",
    "commission_per_transaction",
    "minimum_daily_average",
)
_ACCOUNT_DATETIMES = ("created_at", "updated_at")


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return {k: serialize_value(v) for k, v in obj.items()}
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any) -> dict:
    """Convert a dataclass to a JSON-ready dict.

    Uses ``dataclasses.fields()`` + ``getattr`` rather than ``asdict()`` so
    nested payload dicts are not deep-copied twice.
    """
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value


def _parse_decimal(value: Any) -> Decimal | None:
    if value is None:
        return None
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _parse_datetime(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


def account_from_dict(data: dict[str, Any]) -> Account:
    """Rebuild an :class:`Account` from a stored document."""
    known = {f.name for f in fields(Account)}
    values = {k: v for k, v in data.items() if k in known}

    values["account_type"] = AccountType(values["account_type"])
    for name in _ACCOUNT_DECIMALS:
        if name in values:
            values[name] = _parse_decimal(values[name])
    for name in _ACCOUNT_DATETIMES:
        if name in values:
            values[name] = _parse_datetime(values[name])
    values["holders"] = list(values.get("holders") or [])
    values["authorized_signers"] = list(values.get("authorized_signers") or [])

    return Account(**values)


def _pick(data: dict[str, Any], camel: str, snake: str) -> Any:
    return data[camel] if camel in data else data.get(snake)


def _parse_flag(value: Any, name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be a boolean, got {value!r}")
    return value


def customer_from_dict(data: dict[str, Any]) -> Customer:
    """Build a :class:`Customer` from a customer-service payload.

    The customer service speaks camelCase (``customerType``,
    ``hasCreditCard``); snake_case keys are accepted as well.
    """
    customer_id = data["id"] if "id" in data else data["customer_id"]
    return Customer(
        customer_id=str(customer_id),
        customer_type=CustomerType(_pick(data, "customerType", "customer_type")),
        has_credit_card=_parse_flag(_pick(data, "hasCreditCard", "has_credit_card"), "hasCreditCard"),
        document_number=_pick(data, "documentNumber", "document_number"),
        first_name=_pick(data, "firstName", "first_name"),
        last_name=_pick(data, "lastName", "last_name"),
        business_name=_pick(data, "businessName", "business_name"),
        tax_id=_pick(data, "taxId", "tax_id"),
        email=data.get("email"),
        phone_number=_pick(data, "phoneNumber", "phone_number"),
        address=data.get("address"),
        created_at=_parse_datetime(_pick(data, "createdAt", "created_at")),
        updated_at=_parse_datetime(_pick(data, "updatedAt", "updated_at")),
    )
