"""Account business services."""

from bank_accounts.services.accounts import AccountService
from bank_accounts.services.commission import CommissionService

__all__ = ["AccountService", "CommissionService"]
