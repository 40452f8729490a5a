from storefront_state.core.application.ports.notifier_port import NotifierPort
from storefront_state.core.domain.notifications import (
    DEFAULT_DURATION_MS,
    Notification,
    NotificationAction,
    NotificationLevel,
)


class RecordingNotifier(NotifierPort):
    """
    Fake notifier for testing/local development.
    Keeps every notification in order.
    """

    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(
        self,
        message: str,
        *,
        level: NotificationLevel = NotificationLevel.SUCCESS,
        duration_ms: int = DEFAULT_DURATION_MS,
        action: NotificationAction | None = None,
    ) -> None:
        self.notifications.append(
            Notification(message=message, level=level, duration_ms=duration_ms, action=action)
        )

    @property
    def messages(self) -> list[str]:
        return [n.message for n in self.notifications]

    def clear(self) -> None:
        self.notifications.clear()
