from collections.abc import Callable, Sequence

from storefront_state.core.application.alerts.base_alert_engine import BaseAlertEngine
from storefront_state.core.application.ports.catalog_port import CatalogPort
from storefront_state.core.application.ports.notifier_port import NotifierPort
from storefront_state.core.application.stores.wishlist_store import WishlistStore
from storefront_state.core.domain.alerts import PriceDropAlert
from storefront_state.core.domain.catalog import CatalogProduct
from storefront_state.core.domain.notifications import NotificationLevel
from storefront_state.core.domain.shared import format_amount
from storefront_state.core.domain.wishlist import WishlistEntry


class PriceDropAlertEngine(BaseAlertEngine[PriceDropAlert]):
    """Reports wishlisted products now priced below their wishlisted baseline."""

    event_type = "alerts.price_drop"
    level = NotificationLevel.SUCCESS
    duration_ms = 6000

    def __init__(
        self,
        wishlist: WishlistStore,
        catalog: CatalogPort,
        notifier: NotifierPort,
        navigate: Callable[[str], None] | None = None,
        currency_symbol: str = "₹",
    ) -> None:
        super().__init__(wishlist, catalog, notifier, navigate)
        self.currency_symbol = currency_symbol

    def _select(
        self,
        products: Sequence[CatalogProduct],
        entries: dict[str, WishlistEntry],
    ) -> list[PriceDropAlert]:
        drops = [
            PriceDropAlert.from_baseline(entries[p.id], p)
            for p in products
            if PriceDropAlert.qualifies(entries[p.id], p)
        ]
        # sorted() is stable, so ties keep catalog order.
        return sorted(drops, key=lambda d: d.drop_percent, reverse=True)

    def _build_message(self, alert: PriceDropAlert) -> str:
        return (
            f'Price drop! "{alert.title}" is now '
            f"{self.currency_symbol}{format_amount(alert.new_price)} ({alert.drop_percent}% off)"
        )
