"""In-process event dispatching with handlers that run concurrently."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Protocol


@dataclass
class Event:
    """A named occurrence carrying an arbitrary payload."""

    name: str
    payload: Any = None
    date_time: datetime = field(default_factory=datetime.now)


class EventHandler(Protocol):
    """Anything that can react to an event."""

    def handle(self, event: Event) -> None:
        """React to ``event``."""


class HandlerAlreadyRegisteredError(Exception):
    """Raised when the same handler is registered twice for one event."""

    def __init__(self, message: str = "handler already registered") -> None:
        super().__init__(message)


class EventDispatcher:
    """Keeps handlers per event name and runs them when an event is dispatched."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}
        self._lock = threading.Lock()

    def register(self, event_name: str, handler: EventHandler) -> None:
        """Add ``handler`` for ``event_name``; the same object may not be added twice."""
        with self._lock:
            registered = self._handlers.setdefault(event_name, [])
            if any(existing is handler for existing in registered):
                raise HandlerAlreadyRegisteredError()
            registered.append(handler)

    def dispatch(self, event: Event) -> None:
        """Run every handler of the event concurrently and wait for all of them.

        If a handler raises, the first such exception (in registration order)
        is re-raised once every handler has finished.
        """
        handlers = self.handlers_for(event.name)
        if not handlers:
            return
        with ThreadPoolExecutor(max_workers=len(handlers)) as pool:
            futures = [pool.submit(handler.handle, event) for handler in handlers]
        for future in futures:
            future.result()

    def has(self, event_name: str, handler: EventHandler) -> bool:
        """Tell whether ``handler`` is registered for ``event_name``."""
        with self._lock:
            return any(existing is handler for existing in self._handlers.get(event_name, ()))

    def remove(self, event_name: str, handler: EventHandler) -> None:
        """Drop ``handler`` from ``event_name``; unknown handlers are ignored."""
        with self._lock:
            registered = self._handlers.get(event_name)
            if registered is None:
                return
            for position, existing in enumerate(registered):
                if existing is handler:
                    del registered[position]
                    return

    def clear(self) -> None:
        """Forget every registered handler."""
        with self._lock:
            self._handlers = {}

    def handlers_for(self, event_name: str) -> list[EventHandler]:
        """Return a copy of the handlers registered for ``event_name``."""
        with self._lock:
            return list(self._handlers.get(event_name, ()))