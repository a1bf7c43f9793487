"""Event models for the in-process event system."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict
from uuid import UUID, uuid4


@dataclass
class Event:
    """Record of something that happened inside a translation context.

    Events are handed to every handler registered for ``event_type``.
    """

    event_type: str
    """The type of event (e.g., 'i18n.error')."""

    payload: Any = None
    """Primary object carried by the event (e.g., the raised error)."""

    timestamp: datetime = field(default_factory=datetime.now)
    """When the event occurred."""

    correlation_id: UUID = field(default_factory=uuid4)
    """Unique ID to track related events across the system."""

    metadata: Dict[str, Any] = field(default_factory=dict)
    """Custom metadata for this event type."""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize event to dictionary.

        The payload is rendered with ``str()`` so the result stays
        JSON friendly.

        Returns:
            Dictionary representation of the event with ISO format timestamp
            and UUID as string.
        """
        return {
            "event_type": self.event_type,
            "payload": None if self.payload is None else str(self.payload),
            "timestamp": self.timestamp.isoformat(),
            "correlation_id": str(self.correlation_id),
            "metadata": dict(self.metadata),
        }
