from storefront_state.core.domain.alerts.notification_ledger import NotificationLedger
from storefront_state.core.domain.alerts.value_objects import (
    LOW_STOCK_THRESHOLD,
    LowStockAlert,
    PriceDropAlert,
)

__all__ = ["LOW_STOCK_THRESHOLD", "LowStockAlert", "NotificationLedger", "PriceDropAlert"]
