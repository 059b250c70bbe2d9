"""Custom exception hierarchy for bank-accounts."""


class AccountServiceError(Exception):
    """Base exception for all bank-accounts errors."""


class EntityNotFoundError(AccountServiceError):
    """Raised when a referenced entity does not exist."""


class AccountNotFoundError(EntityNotFoundError):
    """Raised when an account id or account number does not resolve."""

    def __init__(self, value: str, field: str = "id") -> None:
        super().__init__(f"Account not found with {field}: {value}")
        self.field = field
        self.value = value


class CustomerNotFoundError(EntityNotFoundError):
    """Raised when the customer directory has no record for an id."""

    def __init__(self, customer_id: str) -> None:
        super().__init__(f"Customer not found with id: {customer_id}")
        self.customer_id = customer_id


class BusinessRuleViolationError(AccountServiceError):
    """Raised when an account request breaks an account-opening rule."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class InvalidRequestError(AccountServiceError):
    """Raised when request fields are missing or out of range."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = errors


class ConcurrencyConflictError(AccountServiceError):
    """Raised when a write is based on a stale version of a record."""


class CustomerDirectoryError(AccountServiceError):
    """Raised when the customer directory cannot be queried."""


class PublisherError(AccountServiceError):
    """Raised when an event cannot be handed to the message bus."""


class ConfigurationError(AccountServiceError):
    """Raised when configuration is invalid or missing."""
