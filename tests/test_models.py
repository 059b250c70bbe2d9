"""Tests for domain models and the commission engine."""

from datetime import datetime
from decimal import Decimal

import pytest

from bank_accounts.exceptions import InvalidRequestError
from bank_accounts.models import (
    Account,
    AccountRequest,
    AccountType,
    Customer,
    CustomerType,
    defaults_for,
    validate_request_fields,
)


def make_account(**overrides: object) -> Account:
    values: dict = {
        "account_id": "acc-001",
        "account_number": "ACC-0A1B2C3D4E",
        "account_type": AccountType.SAVING,
        "customer_id": "cust-001",
    }
    values.update(overrides)
    return Account(**values)


class TestAccountDefaults:
    """Tests for record defaults."""

    def test_new_account_defaults(self) -> None:
        account = make_account()

        assert account.balance == Decimal("0")
        assert account.free_transactions_per_month == 5
        assert account.commission_per_transaction == Decimal("2.00")
        assert account.current_month_transaction_count == 0
        assert account.current_month_transactions == 0
        assert account.last_transaction_month is None
        assert account.holders == []
        assert account.authorized_signers == []
        assert account.version == 0
        assert isinstance(account.created_at, datetime)
        assert account.updated_at is None


class TestTransactionLimit:
    """Tests for the hard monthly cap."""

    def test_unset_cap_never_reached(self) -> None:
        account = make_account(max_monthly_transactions=None, current_month_transactions=10_000)
        assert account.has_reached_transaction_limit() is False

    def test_below_cap(self) -> None:
        account = make_account(max_monthly_transactions=5, current_month_transactions=4)
        assert account.has_reached_transaction_limit() is False

    def test_at_cap(self) -> None:
        account = make_account(max_monthly_transactions=5, current_month_transactions=5)
        assert account.has_reached_transaction_limit() is True

    def test_cap_ignores_commission_counter(self) -> None:
        account = make_account(max_monthly_transactions=2, current_month_transaction_count=10)
        assert account.has_reached_transaction_limit() is False


class TestCommissionEngine:
    """Tests for free transactions and commission pricing."""

    @pytest.mark.parametrize("free", [0, 1, 5, 7])
    def test_first_free_transactions_cost_nothing(self, free: int) -> None:
        account = make_account(
            free_transactions_per_month=free,
            commission_per_transaction=Decimal("3.50"),
        )
        charged = []
        for _ in range(free + 3):
            charged.append(account.next_transaction_commission())
            account.increment_transaction_count(3, 2025)

        assert charged[:free] == [Decimal("0")] * free
        assert charged[free:] == [Decimal("3.50")] * 3

    def test_pricing_has_no_side_effect(self) -> None:
        account = make_account(current_month_transaction_count=5, last_transaction_month=3, last_transaction_year=2025)

        assert account.next_transaction_commission() == Decimal("2.00")
        assert account.next_transaction_commission() == Decimal("2.00")
        assert account.current_month_transaction_count == 5

    def test_has_free_transactions_available(self) -> None:
        account = make_account(current_month_transaction_count=4)
        assert account.has_free_transactions_available() is True
        account.current_month_transaction_count = 5
        assert account.has_free_transactions_available() is False

    def test_increment_initializes_period(self) -> None:
        account = make_account()

        account.increment_transaction_count(3, 2025)

        assert account.current_month_transaction_count == 1
        assert account.last_transaction_month == 3
        assert account.last_transaction_year == 2025

    def test_increment_same_period_accumulates(self) -> None:
        account = make_account(current_month_transaction_count=2, last_transaction_month=3, last_transaction_year=2025)

        account.increment_transaction_count(3, 2025)

        assert account.current_month_transaction_count == 3

    @pytest.mark.parametrize("month,year", [(4, 2025), (3, 2026), (12, 2024)])
    def test_increment_new_period_resets_to_one(self, month: int, year: int) -> None:
        account = make_account(current_month_transaction_count=9, last_transaction_month=3, last_transaction_year=2025)

        account.increment_transaction_count(month, year)

        assert account.current_month_transaction_count == 1
        assert (account.last_transaction_month, account.last_transaction_year) == (month, year)

    def test_increment_leaves_cap_counter_alone(self) -> None:
        account = make_account(max_monthly_transactions=5)

        account.increment_transaction_count(3, 2025)

        assert account.current_month_transactions == 0

    def test_reset_monthly_counter(self) -> None:
        account = make_account(current_month_transaction_count=12, last_transaction_month=1, last_transaction_year=2024)
        now = datetime(2025, 3, 15, 9, 0)

        account.reset_monthly_counter(now)

        assert account.current_month_transaction_count == 0
        assert account.has_free_transactions_available() is True
        assert account.next_transaction_commission() == Decimal("0")
        assert (account.last_transaction_month, account.last_transaction_year) == (3, 2025)
        assert account.updated_at == now

    def test_for_period_does_not_mutate(self) -> None:
        account = make_account(
            current_month_transaction_count=8,
            last_transaction_month=2,
            last_transaction_year=2025,
            holders=["h-1"],
        )

        rolled = account.for_period(3, 2025)

        assert rolled.current_month_transaction_count == 0
        assert rolled.next_transaction_commission() == Decimal("0")
        assert account.current_month_transaction_count == 8
        assert account.last_transaction_month == 2
        rolled.holders.append("h-2")
        assert account.holders == ["h-1"]

    def test_for_period_same_period_keeps_count(self) -> None:
        account = make_account(current_month_transaction_count=8, last_transaction_month=3, last_transaction_year=2025)
        assert account.for_period(3, 2025).current_month_transaction_count == 8


class TestBusinessAccount:
    """Tests for business-account classification."""

    def test_plain_account(self) -> None:
        assert make_account().is_business_account() is False

    def test_with_holders(self) -> None:
        assert make_account(holders=["cust-2"]).is_business_account() is True

    def test_with_signers(self) -> None:
        assert make_account(authorized_signers=["cust-3"]).is_business_account() is True


class TestApplyTypeDefaults:
    """Tests for per-type defaults on records."""

    def test_saving(self) -> None:
        account = make_account(maintenance_fee=Decimal("7.00"))
        account.apply_type_defaults()

        assert account.maintenance_fee == Decimal("0")
        assert account.max_monthly_transactions == 5

    def test_saving_keeps_explicit_cap(self) -> None:
        account = make_account(max_monthly_transactions=12)
        account.apply_type_defaults()
        assert account.max_monthly_transactions == 12

    def test_checking(self) -> None:
        account = make_account(account_type=AccountType.CHECKING, max_monthly_transactions=20)
        account.apply_type_defaults()

        assert account.maintenance_fee == Decimal("10.00")
        assert account.max_monthly_transactions is None

    def test_checking_keeps_explicit_fee(self) -> None:
        account = make_account(account_type=AccountType.CHECKING, maintenance_fee=Decimal("4.50"))
        account.apply_type_defaults()
        assert account.maintenance_fee == Decimal("4.50")

    def test_fixed_term(self) -> None:
        account = make_account(account_type=AccountType.FIXED_TERM, maintenance_fee=Decimal("3"))
        account.apply_type_defaults()

        assert account.maintenance_fee == Decimal("0")
        assert account.transaction_day == 1

    def test_fixed_term_keeps_day(self) -> None:
        account = make_account(account_type=AccountType.FIXED_TERM, transaction_day=20)
        account.apply_type_defaults()
        assert account.transaction_day == 20

    def test_fixed_term_clears_cap(self) -> None:
        account = make_account(
            account_type=AccountType.FIXED_TERM,
            max_monthly_transactions=1,
            current_month_transactions=1,
        )
        account.apply_type_defaults()

        assert account.max_monthly_transactions is None
        assert account.has_reached_transaction_limit() is False

    @pytest.mark.parametrize("account_type", [AccountType.SAVING, AccountType.CHECKING])
    def test_transaction_day_cleared_outside_fixed_term(self, account_type: AccountType) -> None:
        account = make_account(account_type=account_type, transaction_day=15)
        account.apply_type_defaults()
        assert account.transaction_day is None


class TestDefaultsFor:
    """Tests for the pure request defaults function."""

    def test_fills_request_and_leaves_original(self) -> None:
        request = AccountRequest(account_type=AccountType.SAVING, customer_id="cust-1")

        full = defaults_for(AccountType.SAVING, request)

        assert full.maintenance_fee == Decimal("0")
        assert full.max_monthly_transactions == 5
        assert full.initial_balance == Decimal("0")
        assert full.minimum_opening_amount == Decimal("0")
        assert full.free_transactions_per_month == 5
        assert full.commission_per_transaction == Decimal("2.00")
        assert full.holders == []
        assert request.maintenance_fee is None
        assert request.max_monthly_transactions is None

    def test_checking_clears_cap(self) -> None:
        request = AccountRequest(
            account_type=AccountType.CHECKING,
            customer_id="cust-1",
            max_monthly_transactions=3,
        )
        full = defaults_for(AccountType.CHECKING, request)

        assert full.max_monthly_transactions is None
        assert full.maintenance_fee == Decimal("10.00")

    def test_keeps_custom_commission_terms(self) -> None:
        request = AccountRequest(
            account_type=AccountType.FIXED_TERM,
            customer_id="cust-1",
            free_transactions_per_month=0,
            commission_per_transaction=Decimal("1.25"),
        )
        full = defaults_for(AccountType.FIXED_TERM, request)

        assert full.free_transactions_per_month == 0
        assert full.commission_per_transaction == Decimal("1.25")
        assert full.transaction_day == 1

    def test_only_one_of_cap_and_day_survives(self) -> None:
        fixed = defaults_for(
            AccountType.FIXED_TERM,
            AccountRequest(AccountType.FIXED_TERM, "cust-1", max_monthly_transactions=1, transaction_day=10),
        )
        saving = defaults_for(
            AccountType.SAVING,
            AccountRequest(AccountType.SAVING, "cust-1", max_monthly_transactions=8, transaction_day=15),
        )

        assert (fixed.max_monthly_transactions, fixed.transaction_day) == (None, 10)
        assert (saving.max_monthly_transactions, saving.transaction_day) == (8, None)


class TestCustomer:
    """Tests for Customer helpers."""

    def test_personal_display_name(self) -> None:
        customer = Customer(
            customer_id="c-1",
            customer_type=CustomerType.PERSONAL_VIP,
            first_name="Ana",
            last_name="Torres",
        )
        assert customer.is_personal is True
        assert customer.is_business is False
        assert customer.display_name == "Ana Torres"

    def test_business_display_name(self) -> None:
        customer = Customer(customer_id="c-2", customer_type=CustomerType.BUSINESS_PYME, business_name="Acme")
        assert customer.is_business is True
        assert customer.display_name == "Acme"

    def test_display_name_falls_back_to_id(self) -> None:
        customer = Customer(customer_id="c-3", customer_type=CustomerType.PERSONAL)
        assert customer.display_name == "c-3"
        assert customer.has_credit_card is False


class TestValidateRequestFields:
    """Tests for field-level request checks."""

    def test_valid_request(self) -> None:
        validate_request_fields(
            AccountRequest(
                account_type=AccountType.FIXED_TERM,
                customer_id="cust-1",
                initial_balance=Decimal("100"),
                transaction_day=31,
            )
        )

    def test_collects_all_errors(self) -> None:
        request = AccountRequest(
            account_type=AccountType.SAVING,
            customer_id=" ",
            initial_balance=Decimal("-1"),
            max_monthly_transactions=0,
            transaction_day=32,
        )

        with pytest.raises(InvalidRequestError) as exc_info:
            validate_request_fields(request)

        assert exc_info.value.errors == [
            "Customer ID is required",
            "Initial balance must be zero or positive",
            "Max monthly transactions must be at least 1",
            "Transaction day must be between 1 and 31",
        ]

    def test_missing_account_type(self) -> None:
        request = AccountRequest(account_type=None, customer_id="cust-1")  # type: ignore[arg-type]

        with pytest.raises(InvalidRequestError, match="Account type is required"):
            validate_request_fields(request)

    def test_partial_skips_identity(self) -> None:
        request = AccountRequest(account_type=None, customer_id="")  # type: ignore[arg-type]
        validate_request_fields(request, partial=True)

    def test_negative_commission(self) -> None:
        request = AccountRequest(
            account_type=AccountType.CHECKING,
            customer_id="cust-1",
            commission_per_transaction=Decimal("-0.01"),
        )
        with pytest.raises(InvalidRequestError, match="Commission per transaction must be zero or positive"):
            validate_request_fields(request)
