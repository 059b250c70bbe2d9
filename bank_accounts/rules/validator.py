"""Creation-time business-rule gate for account requests."""

import logging
from decimal import Decimal

from bank_accounts.exceptions import BusinessRuleViolationError
from bank_accounts.models.customer import Customer
from bank_accounts.models.enums import AccountType, CustomerType
from bank_accounts.models.requests import AccountRequest
from bank_accounts.rules.policy import POLICY_MATRIX, AccountPolicy, policy_for

logger = logging.getLogger(__name__)


class AccountRuleValidator:
    """Decide whether a customer may open the requested account.

    Rules are checked in a fixed order and the first failure wins:

    1. the initial balance covers the minimum opening amount;
    2. the customer type may hold the account type (uniqueness and
       holders/signers restrictions included);
    3. credit-card requirements for the (customer, account) pair.

    The validator never touches the store. Callers supply the number of
    accounts of the same type the customer already owns when
    :meth:`needs_existing_count` says it matters.
    """

    def __init__(
        self,
        matrix: dict[tuple[CustomerType, AccountType], AccountPolicy] | None = None,
    ) -> None:
        self.matrix = matrix if matrix is not None else POLICY_MATRIX

    def policy(self, request: AccountRequest, customer: Customer) -> AccountPolicy:
        """Policy row for the request's account type and the customer's type."""
        return policy_for(customer.customer_type, request.account_type, self.matrix)

    def needs_existing_count(self, request: AccountRequest, customer: Customer) -> bool:
        """Whether :meth:`validate` depends on the existing same-type count."""
        return self.policy(request, customer).one_per_customer

    def validate(
        self,
        request: AccountRequest,
        customer: Customer,
        existing_count: int = 0,
    ) -> AccountRequest:
        """Validate a request against the customer's policy.

        Parameters
        ----------
        request : AccountRequest
            Proposed account.
        customer : Customer
            Resolved owner of the account.
        existing_count : int
            Accounts of ``request.account_type`` the customer already owns.

        Returns
        -------
        AccountRequest
            The same request, when every rule passes.

        Raises
        ------
        BusinessRuleViolationError
            With the reason of the first failing rule.
        """
        logger.debug(
            "Validating %s request for customer %s (%s)",
            request.account_type.value,
            customer.customer_id,
            customer.customer_type.value,
        )
        self._check_minimum_balance(request)

        policy = self.policy(request, customer)
        self._check_customer_type(request, policy, existing_count)
        self._check_credit_card(customer, policy)
        return request

    def validate_update(
        self,
        account_type: AccountType,
        request: AccountRequest,
        customer: Customer,
    ) -> AccountRequest:
        """Validate an update request against the owner's policy.

        Only the holders and signers restriction applies after opening;
        the type and owner of an account never change.

        Raises
        ------
        BusinessRuleViolationError
            If the owner's customer type may not add holders or signers.
        """
        self._check_holders(request, policy_for(customer.customer_type, account_type, self.matrix))
        return request

    def _check_minimum_balance(self, request: AccountRequest) -> None:
        initial_balance = request.initial_balance if request.initial_balance is not None else Decimal("0")
        minimum_opening = (
            request.minimum_opening_amount if request.minimum_opening_amount is not None else Decimal("0")
        )
        if initial_balance < minimum_opening:
            raise BusinessRuleViolationError(
                f"Initial balance {initial_balance:.2f} is less than "
                f"minimum opening amount {minimum_opening:.2f}"
            )

    def _check_customer_type(
        self,
        request: AccountRequest,
        policy: AccountPolicy,
        existing_count: int,
    ) -> None:
        if not policy.allowed:
            raise BusinessRuleViolationError(policy.rejection_reason or "Account type not allowed")

        if policy.one_per_customer and existing_count > 0:
            raise BusinessRuleViolationError(
                (policy.duplicate_reason or "Duplicate {account_type} account").format(
                    account_type=request.account_type.value
                )
            )

        self._check_holders(request, policy)

    def _check_holders(self, request: AccountRequest, policy: AccountPolicy) -> None:
        if not policy.allow_holders and request.has_holders_or_signers:
            raise BusinessRuleViolationError(policy.holders_reason or "Holders and signers are not allowed")

    def _check_credit_card(self, customer: Customer, policy: AccountPolicy) -> None:
        if policy.requires_credit_card and not customer.has_credit_card:
            raise BusinessRuleViolationError(policy.credit_card_reason or "An active credit card is required")
