"""Fixtures for infrastructure event system tests."""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from simple_i18n.infrastructure.events import Event, EventDispatcher


@pytest.fixture
def dispatcher():
    """Fresh dispatcher with no handlers."""
    return EventDispatcher(name="test")


@pytest.fixture
def event_factory():
    """Factory for creating test events."""

    def _factory(
        event_type: str = "test.event",
        payload=None,
        timestamp: datetime = None,
        metadata: dict = None,
    ):
        return Event(
            event_type=event_type,
            payload=payload,
            timestamp=timestamp or datetime.now(),
            metadata=metadata or {},
        )

    return _factory


@pytest.fixture
def mock_event_handler():
    """Mock event handler function."""
    return MagicMock()
