from structlog.testing import capture_logs

from storefront_state.core.domain.notifications import NotificationAction, NotificationLevel
from storefront_state.infrastructure.notifications import LogNotifierAdapter


def test_notice_levels_map_to_log_levels():
    notifier = LogNotifierAdapter()

    with capture_logs() as logs:
        notifier.notify("Added to cart!")
        notifier.notify(
            'Low stock alert: "Mug" only has 2 left!',
            level=NotificationLevel.WARNING,
            duration_ms=5000,
            action=NotificationAction(label="View", on_activate=lambda: None),
        )

    assert [entry["log_level"] for entry in logs] == ["info", "warning"]
    assert logs[0]["event"] == "Added to cart!"
    assert logs[1]["duration_ms"] == 5000
    assert logs[1]["action_label"] == "View"
    assert logs[1]["notification_level"] == "warning"
