import logging
from typing import Any, Callable

log = logging.getLogger("pitchsign.event_bus")


class EventBus:
    """Publish/subscribe event system.

    Decouples the session state from the console view and auxiliary
    effects such as the audio cue. Handlers run synchronously, in
    subscription order, on the publishing call.
    """

    def __init__(self):
        self._subscribers: dict[str, list[Callable]] = {}

    def subscribe(self, event_type: str, callback: Callable) -> None:
        if event_type not in self._subscribers:
            self._subscribers[event_type] = []
        self._subscribers[event_type].append(callback)
        log.debug("Subscribed to '%s': %s", event_type,
                  getattr(callback, "__name__", repr(callback)))

    def unsubscribe(self, event_type: str, callback: Callable) -> None:
        if event_type in self._subscribers:
            self._subscribers[event_type] = [
                cb for cb in self._subscribers[event_type] if cb is not callback
            ]

    def publish(self, event_type: str, data: Any = None) -> None:
        callbacks = list(self._subscribers.get(event_type, []))

        for callback in callbacks:
            try:
                callback(data)
            except Exception:
                log.exception(
                    "Error in event handler for '%s': %s",
                    event_type,
                    getattr(callback, "__name__", repr(callback)),
                )
