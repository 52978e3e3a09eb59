"""Synchronous event bus for compilation lifecycle events."""

from typing import Any, Callable


class EventBus:
    """Publish-subscribe bus; listeners run synchronously in registration order.

    Listeners either subscribe to one event type or receive every event.
    Both registration methods return a callable that removes the listener.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Callable]] = {}
        self._global_listeners: list[Callable] = []

    def subscribe(self, event_type: type, callback: Callable) -> Callable[[], None]:
        """Register a callback for a specific event type."""
        listeners = self._listeners.setdefault(event_type, [])
        listeners.append(callback)
        return lambda: listeners.remove(callback)

    def on_all(self, callback: Callable) -> Callable[[], None]:
        """Register a callback that receives every event."""
        self._global_listeners.append(callback)
        return lambda: self._global_listeners.remove(callback)

    def emit(self, event: Any) -> None:
        """Dispatch an event to the global listeners, then the typed ones."""
        for cb in list(self._global_listeners):
            cb(event)
        for cb in list(self._listeners.get(type(event), [])):
            cb(event)
