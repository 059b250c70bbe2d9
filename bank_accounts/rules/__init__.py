"""Account-opening rules."""

from bank_accounts.rules.policy import POLICY_MATRIX, AccountPolicy, policy_for
from bank_accounts.rules.validator import AccountRuleValidator

__all__ = ["POLICY_MATRIX", "AccountPolicy", "AccountRuleValidator", "policy_for"]
