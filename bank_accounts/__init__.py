"""Bank deposit accounts with a monthly transaction-commission engine."""

from bank_accounts.app import build_account_service
from bank_accounts.services import AccountService, CommissionService

__all__ = ["AccountService", "CommissionService", "build_account_service"]
__version__ = "0.1.0"
