"""Configuration management for bank-accounts."""

import os
from dataclasses import dataclass, field
from typing import Any

STORE_BACKENDS = ("memory", "postgres")
PUBLISHER_BACKENDS = ("kafka", "console", "memory")


@dataclass
class KafkaConfig:
    """Kafka producer configuration for account events."""

    bootstrap_servers: str = "localhost:9092"
    topic: str = "bank.accounts.events"
    acks: str = "all"
    batch_size: int = 16384
    linger_ms: int = 5
    compression: str = "snappy"
    retries: int = 3
    flush_timeout: float = 5.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to confluent-kafka config dict."""
        return {
            "bootstrap.servers": self.bootstrap_servers,
            "acks": self.acks,
            "batch.size": self.batch_size,
            "linger.ms": self.linger_ms,
            "compression.type": self.compression,
            "retries": self.retries,
        }


@dataclass
class PostgresConfig:
    """PostgreSQL connection configuration for the account document store."""

    host: str = "localhost"
    port: int = 5432
    database: str = "accounts"
    user: str = "postgres"
    password: str = "postgres"
    table: str = "accounts"

    @property
    def connection_string(self) -> str:
        """Get connection string."""
        return f"postgresql://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"


@dataclass
class CustomerServiceConfig:
    """Customer directory HTTP client configuration."""

    base_url: str = "http://localhost:8081"
    timeout: float = 5.0


@dataclass
class AccountServiceConfig:
    """Main configuration for bank-accounts."""

    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    postgres: PostgresConfig = field(default_factory=PostgresConfig)
    customer_service: CustomerServiceConfig = field(default_factory=CustomerServiceConfig)
    store_backend: str = "memory"
    publisher_backend: str = "console"
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "AccountServiceConfig":
        """Create config from environment variables."""
        kafka = KafkaConfig(
            bootstrap_servers=os.getenv("KAFKA_BOOTSTRAP_SERVERS", "localhost:9092"),
            topic=os.getenv("KAFKA_TOPIC", "bank.accounts.events"),
            acks=os.getenv("KAFKA_ACKS", "all"),
        )

        postgres = PostgresConfig(
            host=os.getenv("POSTGRES_HOST", "localhost"),
            port=int(os.getenv("POSTGRES_PORT", "5432")),
            database=os.getenv("POSTGRES_DB", "accounts"),
            user=os.getenv("POSTGRES_USER", "postgres"),
            password=os.getenv("POSTGRES_PASSWORD", "postgres"),
        )

        customer_service = CustomerServiceConfig(
            base_url=os.getenv("CUSTOMER_SERVICE_URL", "http://localhost:8081"),
            timeout=float(os.getenv("CUSTOMER_SERVICE_TIMEOUT", "5")),
        )

        return cls(
            kafka=kafka,
            postgres=postgres,
            customer_service=customer_service,
            store_backend=os.getenv("ACCOUNT_STORE", "memory"),
            publisher_backend=os.getenv("EVENT_PUBLISHER", "console"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
