"""Account-opening request generator."""

from decimal import Decimal
from typing import Iterator

from bank_accounts.generators.base import BaseGenerator
from bank_accounts.models.customer import Customer
from bank_accounts.models.enums import AccountType
from bank_accounts.models.requests import AccountRequest


class AccountRequestGenerator(BaseGenerator):
    """Generate plausible open requests for a customer.

    Personal customers ask for a random subset of account types, one of
    each; business customers ask for one to three checking accounts, some
    with extra holders and signers.
    """

    MINIMUM_OPENING_AMOUNTS = [Decimal("0"), Decimal("50.00"), Decimal("100.00"), Decimal("500.00")]

    def generate_for_customer(self, customer: Customer) -> Iterator[AccountRequest]:
        """Yield open requests for one customer."""
        if customer.is_business:
            for _ in range(self.rng.randint(1, 3)):
                yield self._request(customer, AccountType.CHECKING, with_holders=self.rng.random() < 0.5)
            return

        count = self.rng.randint(1, len(AccountType))
        for account_type in self.rng.sample(list(AccountType), k=count):
            yield self._request(customer, account_type, with_holders=False)

    def _request(
        self,
        customer: Customer,
        account_type: AccountType,
        with_holders: bool,
    ) -> AccountRequest:
        minimum = self.rng.choice(self.MINIMUM_OPENING_AMOUNTS)
        initial = (minimum + Decimal(str(round(self.rng.uniform(0, 5000), 2)))).quantize(Decimal("0.01"))
        holders = [self.fake.uuid4() for _ in range(self.rng.randint(1, 2))] if with_holders else None
        signers = [self.fake.uuid4()] if with_holders else None
        return AccountRequest(
            account_type=account_type,
            customer_id=customer.customer_id,
            initial_balance=initial,
            minimum_opening_amount=minimum,
            holders=holders,
            authorized_signers=signers,
        )
