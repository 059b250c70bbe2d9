"""Synthetic customer and account-request generators."""

from bank_accounts.generators.account_request import AccountRequestGenerator
from bank_accounts.generators.customer import CustomerGenerator

__all__ = ["AccountRequestGenerator", "CustomerGenerator"]
