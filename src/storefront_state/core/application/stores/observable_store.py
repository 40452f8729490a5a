from collections.abc import Callable
from typing import Any

import structlog

logger = structlog.get_logger()

StoreListener = Callable[[Any], None]


class ObservableStore:
    """Explicit subscribe/unsubscribe surface shared by every store.

    Listeners are called with the store after each mutation has been applied
    and persisted. A failing listener is logged and skipped.
    """

    def __init__(self) -> None:
        self._listeners: list[StoreListener] = []

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: StoreListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit_change(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as exc:
                logger.exception(
                    "Store listener failed",
                    store=type(self).__name__,
                    error_type=type(exc).__name__,
                )
