"""Unit tests for infrastructure event models."""

from datetime import datetime
from uuid import UUID

import pytest

from simple_i18n.infrastructure.events import Event
from simple_i18n.infrastructure.i18n import KeyNotFoundError

pytestmark = pytest.mark.unit


class TestEvent:
    """Tests for Event dataclass."""

    def test_event_creation_with_defaults(self):
        """Test creating event with default values."""
        event = Event(event_type="test.event")

        assert event.event_type == "test.event"
        assert event.payload is None
        assert event.metadata == {}
        assert isinstance(event.timestamp, datetime)
        assert isinstance(event.correlation_id, UUID)

    def test_event_creation_with_all_fields(self, event_factory):
        event = event_factory(event_type="i18n.error", payload="boom", metadata={"key": "x"})

        assert event.event_type == "i18n.error"
        assert event.payload == "boom"
        assert event.metadata == {"key": "x"}

    def test_correlation_ids_unique(self):
        assert Event(event_type="a").correlation_id != Event(event_type="a").correlation_id

    def test_event_to_dict_serialization(self, event_factory):
        """Test event serialization to dict."""
        event = event_factory(metadata={"locale": "de"})
        event_dict = event.to_dict()

        assert event_dict["event_type"] == "test.event"
        assert event_dict["payload"] is None
        assert event_dict["metadata"] == {"locale": "de"}
        assert event_dict["timestamp"] == event.timestamp.isoformat()
        assert event_dict["correlation_id"] == str(event.correlation_id)

    def test_to_dict_renders_payload_as_text(self, event_factory):
        """Error payloads are rendered with str()."""
        error = KeyNotFoundError(key="x").localize("Translation for x not found")
        event_dict = event_factory(payload=error).to_dict()
        assert event_dict["payload"] == "Translation for x not found"

