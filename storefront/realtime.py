"""Realtime Module - in-process state change events.

Stores emit an event after every mutation so views can re-render.
Listeners run synchronously, in subscription order, once the mutation
(and any derived total) is complete.
"""

from dataclasses import dataclass
from typing import Any, Callable

from storefront.logging import get_logger

logger = get_logger(__name__)

# Event names
EVENT_CART_UPDATED = "cart.updated"
EVENT_WISHLIST_UPDATED = "wishlist.updated"


@dataclass(frozen=True)
class StateEvent:
    """State change notification."""

    event: str
    action: str
    data: Any


Listener = Callable[[StateEvent], None]


class StateEmitter:
    """Synchronous observer list."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, event: StateEvent) -> None:
        """Deliver event to every listener.

        A failing listener is logged and skipped; the others still run.
        """
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                logger.warning(f"Listener failed on {event.event}: {e}", exc_info=True)
