from collections.abc import Callable, Sequence

from storefront_state.core.application.alerts.base_alert_engine import BaseAlertEngine
from storefront_state.core.application.ports.catalog_port import CatalogPort
from storefront_state.core.application.ports.notifier_port import NotifierPort
from storefront_state.core.application.stores.wishlist_store import WishlistStore
from storefront_state.core.domain.alerts import LOW_STOCK_THRESHOLD, LowStockAlert
from storefront_state.core.domain.catalog import CatalogProduct
from storefront_state.core.domain.notifications import NotificationLevel
from storefront_state.core.domain.wishlist import WishlistEntry


class LowStockAlertEngine(BaseAlertEngine[LowStockAlert]):
    """Warns about wishlisted products with 1..threshold units left."""

    event_type = "alerts.low_stock"
    level = NotificationLevel.WARNING
    duration_ms = 5000

    def __init__(
        self,
        wishlist: WishlistStore,
        catalog: CatalogPort,
        notifier: NotifierPort,
        navigate: Callable[[str], None] | None = None,
        threshold: int = LOW_STOCK_THRESHOLD,
    ) -> None:
        super().__init__(wishlist, catalog, notifier, navigate)
        self.threshold = threshold

    def _select(
        self,
        products: Sequence[CatalogProduct],
        entries: dict[str, WishlistEntry],
    ) -> list[LowStockAlert]:
        return [
            LowStockAlert.from_product(p)
            for p in products
            if LowStockAlert.qualifies(p.stock, self.threshold)
        ]

    def _build_message(self, alert: LowStockAlert) -> str:
        return f'Low stock alert: "{alert.title}" only has {alert.stock} left!'
