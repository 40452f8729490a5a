from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

DEFAULT_DURATION_MS = 4000


class NotificationLevel(StrEnum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class NotificationAction:
    label: str
    on_activate: Callable[[], None]


@dataclass(frozen=True)
class Notification:
    message: str
    level: NotificationLevel = NotificationLevel.SUCCESS
    duration_ms: int = DEFAULT_DURATION_MS
    action: NotificationAction | None = None
