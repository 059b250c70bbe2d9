"""Base models shared across the package."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from bank_accounts.models.enums import EventType


@dataclass
class EntityActionEvent:
    """Standard event envelope for account lifecycle notifications."""

    event_id: str
    event_type: EventType
    entity_type: str  # Simple class name of the payload entity
    payload: dict[str, Any]
    timestamp: datetime
    metadata: dict[str, Any] = field(default_factory=dict)
