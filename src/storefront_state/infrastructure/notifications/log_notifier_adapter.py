from storefront_state.core.application.ports.notifier_port import NotifierPort
from storefront_state.core.domain.notifications import (
    DEFAULT_DURATION_MS,
    NotificationAction,
    NotificationLevel,
)
from storefront_state.infrastructure.observability import get_logger

logger = get_logger("notifications")

_LOG_METHODS = {
    NotificationLevel.SUCCESS: "info",
    NotificationLevel.INFO: "info",
    NotificationLevel.WARNING: "warning",
    NotificationLevel.ERROR: "error",
}


class LogNotifierAdapter(NotifierPort):
    """Headless notification surface: every notice becomes a log line."""

    def notify(
        self,
        message: str,
        *,
        level: NotificationLevel = NotificationLevel.SUCCESS,
        duration_ms: int = DEFAULT_DURATION_MS,
        action: NotificationAction | None = None,
    ) -> None:
        log = getattr(logger, _LOG_METHODS[level])
        log(
            message,
            event_type="notification",
            notification_level=level.value,
            duration_ms=duration_ms,
            action_label=action.label if action else None,
        )
