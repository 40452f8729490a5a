import asyncio
from collections.abc import Sequence

import structlog

from storefront_state.core.application.alerts.base_alert_engine import BaseAlertEngine
from storefront_state.core.application.stores.wishlist_store import WishlistStore

logger = structlog.get_logger()

DEFAULT_POLL_INTERVAL_SECONDS = 60.0


class AlertScheduler:
    """Drives the alert engines: immediately on start, every interval, and on
    every change of the wishlist's product-id set.

    Must be started from inside a running event loop; store mutations are
    expected on that loop's thread.
    """

    def __init__(
        self,
        wishlist: WishlistStore,
        engines: Sequence[BaseAlertEngine],
        interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS,
    ) -> None:
        self._wishlist = wishlist
        self._engines = list(engines)
        self._interval_seconds = interval_seconds
        self._loop: asyncio.AbstractEventLoop | None = None
        self._poll_task: asyncio.Task | None = None
        self._pending: set[asyncio.Task] = set()
        self._unsubscribe = None
        self._last_ids: frozenset[str] = frozenset()

    @property
    def running(self) -> bool:
        return self._poll_task is not None and not self._poll_task.done()

    def start(self) -> None:
        if self.running:
            return
        self._loop = asyncio.get_running_loop()
        self._last_ids = frozenset(self._wishlist.product_ids)
        self._unsubscribe = self._wishlist.subscribe(self._on_wishlist_change)
        self._poll_task = self._loop.create_task(self._poll_forever())
        logger.info("Alert scheduler started", interval_seconds=self._interval_seconds)

    async def stop(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

        tasks = [t for t in (self._poll_task, *self._pending) if t is not None]
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._poll_task = None
        self._pending.clear()
        logger.info("Alert scheduler stopped")

    async def run_cycle(self) -> None:
        results = await asyncio.gather(
            *(engine.reconcile() for engine in self._engines),
            return_exceptions=True,
        )
        for engine, result in zip(self._engines, results):
            if isinstance(result, Exception):
                logger.error(
                    "Alert engine cycle crashed",
                    event_type=engine.event_type,
                    error_type=type(result).__name__,
                    error_details=str(result),
                )

    async def _poll_forever(self) -> None:
        while True:
            await self.run_cycle()
            await asyncio.sleep(self._interval_seconds)

    def _on_wishlist_change(self, wishlist: WishlistStore) -> None:
        ids = frozenset(wishlist.product_ids)
        if ids == self._last_ids or self._loop is None:
            return
        self._last_ids = ids
        task = self._loop.create_task(self.run_cycle())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
