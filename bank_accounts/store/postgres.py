"""PostgreSQL-backed account document store.

Each account is kept as a JSONB document next to the columns the store
queries on (number, owner, type) and its version.
"""

import logging
from typing import Any

import psycopg
from psycopg import sql
from psycopg.types.json import Jsonb

from bank_accounts.config import PostgresConfig
from bank_accounts.exceptions import ConcurrencyConflictError
from bank_accounts.models.account import Account
from bank_accounts.models.enums import AccountType
from bank_accounts.serialization import account_from_dict, to_dict
from bank_accounts.store.base import AccountStore

logger = logging.getLogger(__name__)

CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS {table} (
    id TEXT PRIMARY KEY,
    account_number TEXT NOT NULL UNIQUE,
    customer_id TEXT NOT NULL,
    account_type TEXT NOT NULL,
    version INTEGER NOT NULL,
    document JSONB NOT NULL
)
"""


# Creation order, matching the in-memory store; ISO timestamps sort as text
LIST_ORDER = "ORDER BY document->>'created_at', id"


class PostgresAccountStore(AccountStore):
    """Account store on a single PostgreSQL table."""

    def __init__(self, config: PostgresConfig | str) -> None:
        """Initialize the store.

        Parameters
        ----------
        config : PostgresConfig | str
            Connection configuration or a connection string.
        """
        if isinstance(config, str):
            self.conninfo = config
            self.table = PostgresConfig().table
        else:
            self.conninfo = config.connection_string
            self.table = config.table

    def _connect(self) -> psycopg.Connection:
        return psycopg.connect(self.conninfo)

    def _query(self, template: str) -> sql.Composed:
        return sql.SQL(template).format(table=sql.Identifier(self.table))

    def initialize_schema(self) -> None:
        """Create the accounts table if it does not exist."""
        with self._connect() as conn:
            conn.execute(self._query(CREATE_TABLE))
        logger.info("Account table %s ready", self.table)

    def _fetch_one(self, template: str, params: tuple[Any, ...]) -> Account | None:
        with self._connect() as conn:
            row = conn.execute(self._query(template), params).fetchone()
        return account_from_dict(row[0]) if row else None

    def _fetch_all(self, template: str, params: tuple[Any, ...] = ()) -> list[Account]:
        with self._connect() as conn:
            rows = conn.execute(self._query(template), params).fetchall()
        return [account_from_dict(row[0]) for row in rows]

    def find_by_id(self, account_id: str) -> Account | None:
        return self._fetch_one("SELECT document FROM {table} WHERE id = %s", (account_id,))

    def find_by_account_number(self, account_number: str) -> Account | None:
        return self._fetch_one(
            "SELECT document FROM {table} WHERE account_number = %s", (account_number,)
        )

    def find_by_customer_id(self, customer_id: str) -> list[Account]:
        return self._fetch_all(
            "SELECT document FROM {table} WHERE customer_id = %s " + LIST_ORDER, (customer_id,)
        )

    def find_all(self) -> list[Account]:
        return self._fetch_all("SELECT document FROM {table} " + LIST_ORDER)

    def count_by_customer_id_and_account_type(
        self, customer_id: str, account_type: AccountType
    ) -> int:
        with self._connect() as conn:
            row = conn.execute(
                self._query(
                    "SELECT count(*) FROM {table} WHERE customer_id = %s AND account_type = %s"
                ),
                (customer_id, account_type.value),
            ).fetchone()
        return int(row[0]) if row else 0

    def exists_by_account_number(self, account_number: str) -> bool:
        with self._connect() as conn:
            row = conn.execute(
                self._query("SELECT 1 FROM {table} WHERE account_number = %s"),
                (account_number,),
            ).fetchone()
        return row is not None

    def save(self, account: Account) -> Account:
        expected = account.version
        new_version = expected + 1
        document = to_dict(account)
        document["version"] = new_version

        with self._connect() as conn:
            if expected == 0:
                cursor = conn.execute(
                    self._query(
                        "INSERT INTO {table} "
                        "(id, account_number, customer_id, account_type, version, document) "
                        "VALUES (%s, %s, %s, %s, %s, %s) ON CONFLICT DO NOTHING"
                    ),
                    (
                        account.account_id,
                        account.account_number,
                        account.customer_id,
                        account.account_type.value,
                        new_version,
                        Jsonb(document),
                    ),
                )
            else:
                cursor = conn.execute(
                    self._query(
                        "UPDATE {table} SET version = %s, document = %s "
                        "WHERE id = %s AND version = %s"
                    ),
                    (new_version, Jsonb(document), account.account_id, expected),
                )

        if cursor.rowcount != 1:
            raise ConcurrencyConflictError(
                f"Account {account.account_id} was modified concurrently "
                f"(expected version {expected})"
            )

        account.version = new_version
        return account

    def delete_by_id(self, account_id: str) -> bool:
        with self._connect() as conn:
            cursor = conn.execute(self._query("DELETE FROM {table} WHERE id = %s"), (account_id,))
        return cursor.rowcount == 1
