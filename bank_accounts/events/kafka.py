"""Kafka publisher for account lifecycle events."""

import json
import logging
from dataclasses import dataclass
from typing import Any

from confluent_kafka import KafkaException, Producer

from bank_accounts.config import KafkaConfig
from bank_accounts.events.publisher import EventPublisher
from bank_accounts.exceptions import PublisherError
from bank_accounts.models.base import EntityActionEvent
from bank_accounts.serialization import to_dict

logger = logging.getLogger(__name__)


@dataclass
class ProducerStats:
    """Track producer delivery statistics."""

    sent: int = 0
    delivered: int = 0
    failed: int = 0

    @property
    def success_rate(self) -> float:
        """Calculate success rate."""
        total = self.delivered + self.failed
        return self.delivered / total if total > 0 else 0.0


class KafkaEventPublisher(EventPublisher):
    """Publish events as JSON to a single Kafka topic, keyed by account id."""

    def __init__(self, config: KafkaConfig | str) -> None:
        """Initialize Kafka publisher.

        Parameters
        ----------
        config : KafkaConfig | str
            Producer configuration or bootstrap servers string.
        """
        if isinstance(config, str):
            config = KafkaConfig(bootstrap_servers=config)

        self.config = config
        self.producer = Producer(config.to_dict())
        self.stats = ProducerStats()

    def _delivery_callback(self, err: Any, msg: Any) -> None:
        """Handle delivery reports."""
        if err:
            self.stats.failed += 1
            logger.error("Event delivery failed: %s", err)
        else:
            self.stats.delivered += 1
            logger.debug("Delivered to %s[%d]@%d", msg.topic(), msg.partition(), msg.offset())

    def send_event(self, key: str, event: EntityActionEvent) -> None:
        value = json.dumps(to_dict(event), ensure_ascii=False, default=str).encode("utf-8")
        try:
            self.producer.produce(
                topic=self.config.topic,
                key=key.encode("utf-8") if key else None,
                value=value,
                callback=self._delivery_callback,
            )
        except (BufferError, KafkaException) as e:
            raise PublisherError(f"Could not enqueue {event.event_type.value} event: {e}") from e

        self.stats.sent += 1
        self.producer.poll(0)

    def flush(self, timeout: float | None = None) -> None:
        """Flush pending messages."""
        self.producer.flush(self.config.flush_timeout if timeout is None else timeout)

    def close(self) -> None:
        """Flush and close the producer."""
        self.flush()
        logger.info(
            "Kafka publisher closed: sent=%d, delivered=%d, failed=%d",
            self.stats.sent,
            self.stats.delivered,
            self.stats.failed,
        )
