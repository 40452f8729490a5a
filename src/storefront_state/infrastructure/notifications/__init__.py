from storefront_state.infrastructure.notifications.log_notifier_adapter import LogNotifierAdapter

__all__ = ["LogNotifierAdapter"]
