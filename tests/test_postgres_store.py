"""Tests for PostgresAccountStore with a mocked psycopg connection."""

from decimal import Decimal
from typing import Iterator
from unittest.mock import MagicMock, patch

import pytest
from psycopg import sql

from bank_accounts.config import PostgresConfig
from bank_accounts.exceptions import ConcurrencyConflictError
from bank_accounts.models import Account, AccountType
from bank_accounts.serialization import to_dict
from bank_accounts.store.postgres import PostgresAccountStore


@pytest.fixture
def mock_conn() -> MagicMock:
    conn = MagicMock()
    conn.__enter__.return_value = conn
    return conn


@pytest.fixture
def mock_cursor(mock_conn: MagicMock) -> MagicMock:
    cursor = MagicMock()
    mock_conn.execute.return_value = cursor
    return cursor


@pytest.fixture
def pg_store(mock_conn: MagicMock) -> Iterator[PostgresAccountStore]:
    with patch("bank_accounts.store.postgres.psycopg") as mock_psycopg:
        mock_psycopg.connect.return_value = mock_conn
        yield PostgresAccountStore(PostgresConfig(database="accounts_test"))


def sample_account(**overrides: object) -> Account:
    values: dict = {
        "account_id": "acc-001",
        "account_number": "ACC-0A1B2C3D4E",
        "account_type": AccountType.CHECKING,
        "customer_id": "cust-001",
        "balance": Decimal("250.00"),
        "maintenance_fee": Decimal("10.00"),
    }
    values.update(overrides)
    return Account(**values)


def executed_sql(conn: MagicMock) -> str:
    """Literal SQL text of the last executed query."""
    query = conn.execute.call_args.args[0]
    return "".join(part.as_string(None) for part in query if isinstance(part, sql.SQL))

class TestPostgresStoreInit:
    """Tests for configuration handling."""

    def test_from_config(self) -> None:
        store = PostgresAccountStore(PostgresConfig(host="db", database="bank"))

        assert store.conninfo == "postgresql://postgres:postgres@db:5432/bank"
        assert store.table == "accounts"

    def test_from_connection_string(self) -> None:
        store = PostgresAccountStore("postgresql://u:p@h:5432/d")
        assert store.conninfo == "postgresql://u:p@h:5432/d"

    def test_initialize_schema(self, pg_store: PostgresAccountStore, mock_conn: MagicMock) -> None:
        pg_store.initialize_schema()
        mock_conn.execute.assert_called_once()


class TestPostgresStoreQueries:
    """Tests for reads."""

    def test_find_by_id(self, pg_store: PostgresAccountStore, mock_conn: MagicMock, mock_cursor: MagicMock) -> None:
        mock_cursor.fetchone.return_value = (to_dict(sample_account(version=3)),)

        account = pg_store.find_by_id("acc-001")

        assert account is not None
        assert account.account_id == "acc-001"
        assert account.balance == Decimal("250.00")
        assert account.account_type is AccountType.CHECKING
        assert account.version == 3
        assert mock_conn.execute.call_args.args[1] == ("acc-001",)

    def test_find_by_id_missing(self, pg_store: PostgresAccountStore, mock_cursor: MagicMock) -> None:
        mock_cursor.fetchone.return_value = None
        assert pg_store.find_by_id("nope") is None

    def test_find_by_account_number(
        self, pg_store: PostgresAccountStore, mock_conn: MagicMock, mock_cursor: MagicMock
    ) -> None:
        mock_cursor.fetchone.return_value = (to_dict(sample_account()),)

        account = pg_store.find_by_account_number("ACC-0A1B2C3D4E")

        assert account is not None
        assert mock_conn.execute.call_args.args[1] == ("ACC-0A1B2C3D4E",)

    def test_find_by_customer_id(
        self, pg_store: PostgresAccountStore, mock_conn: MagicMock, mock_cursor: MagicMock
    ) -> None:
        mock_cursor.fetchall.return_value = [
            (to_dict(sample_account()),),
            (to_dict(sample_account(account_id="acc-002", account_number="ACC-FFFFFFFFFF")),),
        ]

        accounts = pg_store.find_by_customer_id("cust-001")

        assert [a.account_id for a in accounts] == ["acc-001", "acc-002"]
        assert "ORDER BY document->>'created_at'" in executed_sql(mock_conn)

    def test_find_all_empty(self, pg_store: PostgresAccountStore, mock_cursor: MagicMock) -> None:
        mock_cursor.fetchall.return_value = []
        assert pg_store.find_all() == []

    def test_find_all_in_creation_order(
        self, pg_store: PostgresAccountStore, mock_conn: MagicMock, mock_cursor: MagicMock
    ) -> None:
        mock_cursor.fetchall.return_value = []

        pg_store.find_all()

        assert executed_sql(mock_conn).endswith("ORDER BY document->>'created_at', id")

    def test_count(self, pg_store: PostgresAccountStore, mock_conn: MagicMock, mock_cursor: MagicMock) -> None:
        mock_cursor.fetchone.return_value = (2,)

        count = pg_store.count_by_customer_id_and_account_type("cust-001", AccountType.SAVING)

        assert count == 2
        assert mock_conn.execute.call_args.args[1] == ("cust-001", "SAVING")

    def test_exists(self, pg_store: PostgresAccountStore, mock_cursor: MagicMock) -> None:
        mock_cursor.fetchone.return_value = (1,)
        assert pg_store.exists_by_account_number("ACC-0A1B2C3D4E") is True

        mock_cursor.fetchone.return_value = None
        assert pg_store.exists_by_account_number("ACC-0000000000") is False


class TestPostgresStoreWrites:
    """Tests for versioned writes."""

    def test_insert(self, pg_store: PostgresAccountStore, mock_conn: MagicMock, mock_cursor: MagicMock) -> None:
        mock_cursor.rowcount = 1
        account = sample_account()

        saved = pg_store.save(account)

        params = mock_conn.execute.call_args.args[1]
        assert params[:5] == ("acc-001", "ACC-0A1B2C3D4E", "cust-001", "CHECKING", 1)
        assert params[5].obj["version"] == 1
        assert params[5].obj["balance"] == "250.00"
        assert saved.version == 1

    def test_update(self, pg_store: PostgresAccountStore, mock_conn: MagicMock, mock_cursor: MagicMock) -> None:
        mock_cursor.rowcount = 1
        account = sample_account(version=4)

        pg_store.save(account)

        params = mock_conn.execute.call_args.args[1]
        assert params[0] == 5
        assert params[2:] == ("acc-001", 4)
        assert account.version == 5

    def test_stale_update(self, pg_store: PostgresAccountStore, mock_cursor: MagicMock) -> None:
        mock_cursor.rowcount = 0
        account = sample_account(version=2)

        with pytest.raises(ConcurrencyConflictError):
            pg_store.save(account)

        assert account.version == 2

    def test_delete(self, pg_store: PostgresAccountStore, mock_cursor: MagicMock) -> None:
        mock_cursor.rowcount = 1
        assert pg_store.delete_by_id("acc-001") is True

        mock_cursor.rowcount = 0
        assert pg_store.delete_by_id("acc-001") is False
