"""Customer generator for seeding a customer directory."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterator

from bank_accounts.generators.base import BaseGenerator
from bank_accounts.models.customer import Customer
from bank_accounts.models.enums import CustomerType


class CustomerGenerator(BaseGenerator):
    """Generate synthetic customers of every customer type."""

    CUSTOMER_TYPES = list(CustomerType)
    CUSTOMER_TYPE_WEIGHTS = [0.55, 0.15, 0.20, 0.10]

    # Probability of holding a credit card, by customer type
    CREDIT_CARD_RATES = {
        CustomerType.PERSONAL: 0.40,
        CustomerType.PERSONAL_VIP: 0.85,
        CustomerType.BUSINESS: 0.50,
        CustomerType.BUSINESS_PYME: 0.70,
    }

    def generate(self, customer_type: CustomerType | None = None) -> Customer:
        """Generate a single customer.

        Parameters
        ----------
        customer_type : CustomerType | None
            Force a customer type instead of drawing one.

        Returns
        -------
        Customer
            Generated customer.
        """
        if customer_type is None:
            customer_type = self.rng.choices(
                self.CUSTOMER_TYPES, weights=self.CUSTOMER_TYPE_WEIGHTS, k=1
            )[0]
        return self._generate_one(customer_type)

    def generate_batch(self, count: int) -> Iterator[Customer]:
        """Generate multiple customers.

        Parameters
        ----------
        count : int
            Number of customers to generate.

        Yields
        ------
        Customer
            Generated customers.
        """
        for _ in range(count):
            yield self.generate()

    def _generate_one(self, customer_type: CustomerType) -> Customer:
        created_at = datetime.now() - timedelta(days=self.rng.randint(0, 5 * 365))
        has_credit_card = self.rng.random() < self.CREDIT_CARD_RATES[customer_type]

        if customer_type in (CustomerType.BUSINESS, CustomerType.BUSINESS_PYME):
            return Customer(
                customer_id=self.fake.uuid4(),
                customer_type=customer_type,
                has_credit_card=has_credit_card,
                business_name=self.fake.company(),
                tax_id=self.fake.bothify("20#########"),
                email=self.fake.company_email(),
                phone_number=self.fake.phone_number(),
                address=self.fake.address().replace("\n", ", "),
                created_at=created_at,
            )

        return Customer(
            customer_id=self.fake.uuid4(),
            customer_type=customer_type,
            has_credit_card=has_credit_card,
            document_number=self.fake.bothify("########"),
            first_name=self.fake.first_name(),
            last_name=self.fake.last_name(),
            email=self.fake.email(),
            phone_number=self.fake.phone_number(),
            address=self.fake.address().replace("\n", ", "),
            created_at=created_at,
        )
