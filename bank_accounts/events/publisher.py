"""Event publisher port plus console and in-memory publishers."""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from bank_accounts.models.base import EntityActionEvent
from bank_accounts.serialization import to_dict


class EventPublisher(ABC):
    """Fire-and-forget sink for account lifecycle events."""

    @abstractmethod
    def send_event(self, key: str, event: EntityActionEvent) -> None:
        """Publish one event.

        Raises
        ------
        PublisherError
            If the event could not be handed to the transport.
        """

    def close(self) -> None:
        """Release transport resources."""


@dataclass
class InMemoryEventPublisher(EventPublisher):
    """Keeps published events in a list."""

    events: list[tuple[str, EntityActionEvent]] = field(default_factory=list)

    def send_event(self, key: str, event: EntityActionEvent) -> None:
        self.events.append((key, event))

    def events_of_type(self, event_type: str) -> list[EntityActionEvent]:
        return [event for _, event in self.events if event.event_type == event_type]


class ConsoleEventPublisher(EventPublisher):
    """Output events to console (stdout) for debugging."""

    def __init__(self, pretty: bool = True) -> None:
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def send_event(self, key: str, event: EntityActionEvent) -> None:
        data = {"key": key, **to_dict(event)}
        if self.pretty:
            print(json.dumps(data, indent=2, ensure_ascii=False, default=str))
        else:
            print(json.dumps(data, ensure_ascii=False, default=str))
        event_type = event.event_type.value
        self._counts[event_type] = self._counts.get(event_type, 0) + 1

    def close(self) -> None:
        """Print summary and close."""
        print(f"\n{'='*60}")
        print("Console Publisher Summary")
        print("=" * 60)
        for event_type, count in self._counts.items():
            print(f"  {event_type}: {count} events")
