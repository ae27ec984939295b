"""Synchronous notification bus for post events."""
from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from postboard.models.events import PostEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[PostEvent], None]


class EventBus:
    """Deliver each published event to every subscriber, in subscription order."""

    def __init__(self) -> None:
        self._handlers: list[EventHandler] = []
        self._lock = threading.Lock()

    def subscribe(self, handler: EventHandler) -> Callable[[], None]:
        """Register ``handler`` and return a callable that removes it again."""
        with self._lock:
            self._handlers.append(handler)

        def _unsubscribe() -> None:
            with self._lock:
                if handler in self._handlers:
                    self._handlers.remove(handler)

        return _unsubscribe

    def publish(self, event: PostEvent) -> None:
        """Deliver ``event`` to the current subscribers.

        A failing subscriber propagates its exception to the publisher; the
        remaining subscribers are not called.
        """
        with self._lock:
            handlers = list(self._handlers)
        logger.debug("Publishing %s to %d subscriber(s): %s", event.name, len(handlers), event)
        for handler in handlers:
            handler(event)
