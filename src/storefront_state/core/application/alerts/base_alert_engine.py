"""Wishlist-vs-catalog reconciliation shared by the low-stock and price-drop alerts.

One cycle: skip on an empty wishlist, fetch live rows for the wishlisted ids,
keep active products, let the specialization pick qualifying alerts, then
notify once per id per session (tracked in a monotonic NotificationLedger).
Catalog failures abort the cycle without touching the ledger.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from functools import partial
from typing import Generic, TypeVar

import structlog

from storefront_state.core.application.ports.catalog_port import CatalogPort
from storefront_state.core.application.ports.common.exceptions import InfraError
from storefront_state.core.application.ports.notifier_port import NotifierPort
from storefront_state.core.application.stores.observable_store import ObservableStore
from storefront_state.core.application.stores.wishlist_store import WishlistStore
from storefront_state.core.domain.alerts import LowStockAlert, NotificationLedger, PriceDropAlert
from storefront_state.core.domain.catalog import CatalogProduct
from storefront_state.core.domain.notifications import NotificationAction, NotificationLevel
from storefront_state.core.domain.wishlist import WishlistEntry

logger = structlog.get_logger()

A = TypeVar("A", LowStockAlert, PriceDropAlert)


class BaseAlertEngine(ObservableStore, ABC, Generic[A]):
    event_type: str = "alerts.reconcile"
    level: NotificationLevel = NotificationLevel.INFO
    duration_ms: int = 5000

    def __init__(
        self,
        wishlist: WishlistStore,
        catalog: CatalogPort,
        notifier: NotifierPort,
        navigate: Callable[[str], None] | None = None,
    ) -> None:
        super().__init__()
        self._wishlist = wishlist
        self._catalog = catalog
        self._notifier = notifier
        self._navigate = navigate
        self._ledger = NotificationLedger()
        self._alerts: tuple[A, ...] = ()
        self._issued = 0
        self._applied = 0

    @property
    def alerts(self) -> tuple[A, ...]:
        """Qualifying items from the most recent applied cycle."""
        return self._alerts

    @property
    def ledger(self) -> NotificationLedger:
        return self._ledger

    async def reconcile(self) -> tuple[A, ...] | None:
        """Runs one reconciliation cycle.

        Returns the applied alerts, or None when the cycle was aborted by a
        catalog failure or discarded as stale.
        """
        entries = self._wishlist.items
        if not entries:
            self._set_alerts(())
            return ()

        self._issued += 1
        ticket = self._issued
        requested = frozenset(entry.product_id for entry in entries)

        try:
            products = await self._catalog.fetch_by_ids([entry.product_id for entry in entries])
        except InfraError as e:
            logger.warning(
                "Catalog fetch failed, skipping cycle",
                event_type=self.event_type,
                error_type=type(e).__name__,
                error_details=str(e),
            )
            return None

        if not self._is_current(ticket, requested):
            logger.info("Discarding stale reconciliation result", event_type=self.event_type, ticket=ticket)
            return None
        self._applied = ticket

        by_product = {entry.product_id: entry for entry in self._wishlist.items}
        active = [p for p in products if p.is_active and p.id in by_product]
        alerts = tuple(self._select(active, by_product))

        self._set_alerts(alerts)
        self._notify_new(alerts)
        return alerts

    def _is_current(self, ticket: int, requested: frozenset[str]) -> bool:
        # Latest-wins: the wishlist id set must be unchanged since the fetch
        # was issued, and no newer fetch may have been applied already.
        if ticket < self._applied:
            return False
        return frozenset(self._wishlist.product_ids) == requested

    def _set_alerts(self, alerts: tuple[A, ...]) -> None:
        if alerts == self._alerts:
            return
        self._alerts = alerts
        self._emit_change()

    def _notify_new(self, alerts: Sequence[A]) -> None:
        for alert in alerts:
            if alert.id in self._ledger:
                continue
            self._notifier.notify(
                self._build_message(alert),
                level=self.level,
                duration_ms=self.duration_ms,
                action=self._build_action(alert),
            )
            self._ledger.record(alert.id)
            logger.info("Alert notified", event_type=self.event_type, product_id=alert.id)

    def _build_action(self, alert: A) -> NotificationAction | None:
        if self._navigate is None:
            return None
        return NotificationAction(label="View", on_activate=partial(self._navigate, f"/product/{alert.slug}"))

    @abstractmethod
    def _select(
        self,
        products: Sequence[CatalogProduct],
        entries: dict[str, WishlistEntry],
    ) -> list[A]:
        """Picks the qualifying alerts from active catalog rows, in display order."""

    @abstractmethod
    def _build_message(self, alert: A) -> str:
        pass
