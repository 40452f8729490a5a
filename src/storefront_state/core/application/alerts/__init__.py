from storefront_state.core.application.alerts.alert_scheduler import (
    DEFAULT_POLL_INTERVAL_SECONDS,
    AlertScheduler,
)
from storefront_state.core.application.alerts.base_alert_engine import BaseAlertEngine
from storefront_state.core.application.alerts.low_stock_alert_engine import LowStockAlertEngine
from storefront_state.core.application.alerts.price_drop_alert_engine import PriceDropAlertEngine

__all__ = [
    "DEFAULT_POLL_INTERVAL_SECONDS",
    "AlertScheduler",
    "BaseAlertEngine",
    "LowStockAlertEngine",
    "PriceDropAlertEngine",
]
