"""HTTP client for the customer service."""

from __future__ import annotations

import logging

import httpx

from bank_accounts.config import CustomerServiceConfig
from bank_accounts.customers.directory import CustomerDirectory
from bank_accounts.exceptions import CustomerDirectoryError
from bank_accounts.models.customer import Customer
from bank_accounts.serialization import customer_from_dict

logger = logging.getLogger(__name__)


class HttpCustomerDirectory(CustomerDirectory):
    """Customer directory backed by ``GET /api/customers/{id}``."""

    def __init__(
        self,
        config: CustomerServiceConfig | str,
        client: httpx.Client | None = None,
    ) -> None:
        if isinstance(config, str):
            config = CustomerServiceConfig(base_url=config)
        self.config = config
        self._client = client

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.config.base_url.rstrip("/"),
                timeout=self.config.timeout,
                headers={"Accept": "application/json"},
            )
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def get_customer_by_id(self, customer_id: str) -> Customer | None:
        logger.debug("Fetching customer %s", customer_id)
        try:
            response = self._get_client().get(f"/api/customers/{customer_id}")
        except httpx.HTTPError as e:
            raise CustomerDirectoryError(f"Customer service unreachable: {e}") from e

        if response.status_code == httpx.codes.NOT_FOUND:
            return None

        try:
            response.raise_for_status()
            return customer_from_dict(response.json())
        except httpx.HTTPStatusError as e:
            raise CustomerDirectoryError(
                f"Customer service returned {e.response.status_code} for {customer_id}"
            ) from e
        except (KeyError, ValueError) as e:
            raise CustomerDirectoryError(f"Malformed customer payload for {customer_id}: {e}") from e
