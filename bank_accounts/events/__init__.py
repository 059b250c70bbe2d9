"""Account event publishers."""

from bank_accounts.events.publisher import (
    ConsoleEventPublisher,
    EventPublisher,
    InMemoryEventPublisher,
)

__all__ = ["ConsoleEventPublisher", "EventPublisher", "InMemoryEventPublisher"]
