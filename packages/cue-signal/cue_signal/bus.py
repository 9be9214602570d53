"""Pub/sub bus for scene lifecycle signals with per-tick flush semantics."""
from __future__ import annotations

from typing import Any, Callable

_Handler = Callable[[str, dict[str, Any]], None]

# Subscribing to this name receives every signal.
ANY = "*"


class SignalBus:
    """Queues published signals and dispatches them on :meth:`flush`.

    Handlers subscribed to :data:`ANY` run after the named handlers of each
    signal. Signals published from inside a handler are delivered on the
    next flush.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> Callable[[], None]:
        self._subscribers.setdefault(signal_name, []).append(handler)
        return lambda: self.unsubscribe(signal_name, handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is not None and handler in handlers:
            handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> int:
        """Dispatch everything queued so far. Returns the number of signals."""
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in list(self._subscribers.get(signal_name, ())):
                handler(signal_name, data)
            for handler in list(self._subscribers.get(ANY, ())):
                handler(signal_name, data)
        return len(snapshot)

    def clear(self) -> None:
        self._queue.clear()
