"""
In-process event dispatcher.

Stands in for the platform event bus: listeners republish inbound data as
named events and package users subscribe to them.
"""

import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

WEBHOOK_EVENT = "googlemeet:webhook"

EventHandler = Callable[[dict[str, Any]], None]


class EventDispatcher:
    """Publish/subscribe registry keyed by event name."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def subscribe(self, event: str, handler: EventHandler) -> None:
        self._handlers[event].append(handler)

    def unsubscribe(self, event: str, handler: EventHandler) -> None:
        handlers = self._handlers.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def trigger_event(self, event: str, data: dict[str, Any]) -> int:
        """
        Deliver data to every handler subscribed to an event.

        A failing handler is logged and does not prevent delivery to the
        remaining handlers.

        Args:
            event: Event name (e.g. "googlemeet:webhook")
            data: Event payload

        Returns:
            Number of handlers that completed successfully
        """
        delivered = 0
        for handler in list(self._handlers.get(event, [])):
            try:
                handler(data)
                delivered += 1
            except Exception:
                logger.exception("[googlemeet] Handler for %s failed", event)
        return delivered
