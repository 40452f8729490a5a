from storefront_state.core.domain.alerts.value_objects.low_stock_alert import (
    LOW_STOCK_THRESHOLD,
    LowStockAlert,
)
from storefront_state.core.domain.alerts.value_objects.price_drop_alert import PriceDropAlert

__all__ = ["LOW_STOCK_THRESHOLD", "LowStockAlert", "PriceDropAlert"]
