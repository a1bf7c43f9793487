"""In-process event system.

Usage:

    from simple_i18n.infrastructure.events import Event, EventDispatcher

    dispatcher = EventDispatcher()

    @dispatcher.register_event_handler("i18n.error")
    def handle_error(event: Event) -> None:
        print(event.payload)

    dispatcher.dispatch_event(Event(event_type="i18n.error", payload=error))
"""

from simple_i18n.infrastructure.events.dispatcher import EventDispatcher
from simple_i18n.infrastructure.events.models import Event

__all__ = [
    "Event",
    "EventDispatcher",
]
