from storefront_state.core.domain.notifications.notification import (
    DEFAULT_DURATION_MS,
    Notification,
    NotificationAction,
    NotificationLevel,
)

__all__ = ["DEFAULT_DURATION_MS", "Notification", "NotificationAction", "NotificationLevel"]
