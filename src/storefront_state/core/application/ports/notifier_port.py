from abc import ABC, abstractmethod

from storefront_state.core.domain.notifications import (
    DEFAULT_DURATION_MS,
    NotificationAction,
    NotificationLevel,
)


class NotifierPort(ABC):
    """Fire-and-forget notification surface (toasts, snackbars, log lines)."""

    @abstractmethod
    def notify(
        self,
        message: str,
        *,
        level: NotificationLevel = NotificationLevel.SUCCESS,
        duration_ms: int = DEFAULT_DURATION_MS,
        action: NotificationAction | None = None,
    ) -> None:
        pass
