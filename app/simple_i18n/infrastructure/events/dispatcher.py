"""Event dispatcher with an in-process handler registry.

Each translation context owns its own dispatcher so independent namespaces
never share handlers. Handlers are called synchronously, in registration
order, when events are dispatched.
"""

from dataclasses import dataclass
from threading import Lock
from typing import Any, Callable, Dict, List, Optional

from simple_i18n.infrastructure.events.models import Event
from simple_i18n.infrastructure.logging import get_module_logger

logger = get_module_logger()


@dataclass
class _Registration:
    handler: Callable[[Event], Any]
    once: bool = False


class EventDispatcher:
    """Registry of event handlers keyed by event type.

    Attributes:
        name: Label used in logs (usually the owning context name).
    """

    def __init__(self, name: str = "default"):
        self.name = name
        self._handlers: Dict[str, List[_Registration]] = {}
        self._lock = Lock()

    def register_event_handler(
        self,
        event_type: str,
        handler: Optional[Callable[[Event], Any]] = None,
        once: bool = False,
    ):
        """Register a handler for an event type.

        Can be called directly or used as a decorator:

            dispatcher.register_event_handler("i18n.error", handle_error)

            @dispatcher.register_event_handler("i18n.error")
            def handle_error(event): ...

        Args:
            event_type: The type of event to handle (e.g., 'i18n.error').
            handler: Handler to register. Omit to get a decorator.
            once: Remove the handler after its first invocation.

        Returns:
            The handler itself, or a decorator when no handler is given.
        """

        def decorator(handler_func: Callable[[Event], Any]) -> Callable[[Event], Any]:
            with self._lock:
                registrations = self._handlers.setdefault(event_type, [])
                registrations.append(_Registration(handler_func, once))
                total = len(registrations)
            logger.debug(
                "registered_event_handler",
                dispatcher=self.name,
                handler=getattr(handler_func, "__name__", "unknown"),
                event_type=event_type,
                once=once,
                total_handlers=total,
            )
            return handler_func

        if handler is None:
            return decorator
        return decorator(handler)

    def remove_handler(self, event_type: str, handler: Callable[[Event], Any]) -> bool:
        """Remove the first registration of ``handler`` for ``event_type``.

        Returns:
            True if a registration was removed.
        """
        with self._lock:
            registrations = self._handlers.get(event_type, [])
            for index, registration in enumerate(registrations):
                if registration.handler is handler:
                    del registrations[index]
                    if not registrations:
                        del self._handlers[event_type]
                    return True
        return False

    def clear_handlers(self, event_type: Optional[str] = None) -> None:
        """Remove all handlers, or only those for ``event_type``."""
        with self._lock:
            if event_type is None:
                self._handlers.clear()
            else:
                self._handlers.pop(event_type, None)
        logger.debug("cleared_event_handlers", dispatcher=self.name, event_type=event_type)

    def get_registered_events(self) -> List[str]:
        """Get list of all event types with at least one handler."""
        with self._lock:
            return list(self._handlers.keys())

    def get_handlers_for_event(self, event_type: str) -> List[Callable[[Event], Any]]:
        """Get all handlers registered for a specific event type."""
        with self._lock:
            return [r.handler for r in self._handlers.get(event_type, [])]

    def has_handlers(self, event_type: str) -> bool:
        with self._lock:
            return bool(self._handlers.get(event_type))

    def dispatch_event(self, event: Event) -> List[Any]:
        """Dispatch event synchronously to all registered handlers.

        If a handler raises an exception, it is caught and logged, and
        processing continues with the remaining handlers. Handlers
        registered with ``once=True`` are removed before they are called.

        Args:
            event: The event to dispatch.

        Returns:
            List of return values from the handlers that completed.
        """
        with self._lock:
            registrations = list(self._handlers.get(event.event_type, []))
            remaining = [r for r in registrations if not r.once]
            if len(remaining) != len(registrations):
                if remaining:
                    self._handlers[event.event_type] = remaining
                else:
                    self._handlers.pop(event.event_type, None)

        logger.debug(
            "dispatching_event",
            dispatcher=self.name,
            event_type=event.event_type,
            handler_count=len(registrations),
            correlation_id=str(event.correlation_id),
        )

        results = []
        for registration in registrations:
            try:
                results.append(registration.handler(event))
            except Exception as e:
                logger.error(
                    "event_handler_failed",
                    dispatcher=self.name,
                    handler=getattr(registration.handler, "__name__", "unknown"),
                    error=str(e),
                    event=event.to_dict(),
                )

        return results
