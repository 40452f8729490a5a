"""Composition root: builds one explicit set of stores and engines per session."""

from collections.abc import Callable
from dataclasses import dataclass, field

import structlog

from storefront_state.core.application.alerts import (
    AlertScheduler,
    LowStockAlertEngine,
    PriceDropAlertEngine,
)
from storefront_state.core.application.ports import CatalogPort, CouponPort, NotifierPort, StoragePort
from storefront_state.core.application.ports.common.exceptions import ConfigurationError
from storefront_state.core.application.stores import (
    CART_STORAGE_KEY,
    COMPARE_STORAGE_KEY,
    RECENTLY_VIEWED_STORAGE_KEY,
    WISHLIST_STORAGE_KEY,
    CartStore,
    CompareStore,
    PersistentCollection,
    RecentlyViewedStore,
    WishlistStore,
)
from storefront_state.core.application.usecases import ApplyCouponUseCase
from storefront_state.core.domain.cart import AppliedCoupon, CartLineItem, OrderSummary
from storefront_state.core.domain.compare import CompareEntry
from storefront_state.core.domain.recently_viewed import RecentlyViewedEntry
from storefront_state.core.domain.shared import new_id, now_ms
from storefront_state.core.domain.wishlist import WishlistEntry
from storefront_state.infrastructure.catalog import SupabaseCatalogAdapter, SupabaseHttpClient
from storefront_state.infrastructure.common.retry import RetryPolicy
from storefront_state.infrastructure.configuration import Settings
from storefront_state.infrastructure.notifications import LogNotifierAdapter
from storefront_state.infrastructure.observability import bind_session
from storefront_state.infrastructure.storage import JsonFileStorageAdapter

logger = structlog.get_logger()


@dataclass
class StorefrontSession:
    session_id: str
    settings: Settings
    cart: CartStore
    wishlist: WishlistStore
    compare: CompareStore
    recently_viewed: RecentlyViewedStore
    low_stock_alerts: LowStockAlertEngine
    price_drop_alerts: PriceDropAlertEngine
    scheduler: AlertScheduler
    apply_coupon: ApplyCouponUseCase
    collections: list[PersistentCollection] = field(default_factory=list)

    def start(self) -> None:
        self.scheduler.start()

    async def stop(self) -> None:
        await self.scheduler.stop()
        self.flush()

    def flush(self) -> None:
        for collection in self.collections:
            collection.flush()

    def order_summary(self, applied_coupon: AppliedCoupon | None = None) -> OrderSummary:
        return self.cart.order_summary(
            applied_coupon,
            free_shipping_threshold=self.settings.free_shipping_threshold,
            delivery_charge=self.settings.delivery_charge,
        )


def _build_catalog_adapter(settings: Settings) -> SupabaseCatalogAdapter:
    # Fail fast on missing credentials
    settings.validate_catalog_credentials()
    client = SupabaseHttpClient(
        base_url=settings.catalog_base_url,
        api_key=settings.catalog_api_key.get_secret_value(),
        timeout_seconds=settings.catalog_timeout_seconds,
    )
    return SupabaseCatalogAdapter(
        client,
        RetryPolicy(max_attempts=settings.catalog_max_attempts),
        table=settings.catalog_table,
        coupon_table=settings.coupon_table,
    )


def build_storefront_session(
    settings: Settings,
    storage: StoragePort | None = None,
    catalog: CatalogPort | None = None,
    coupons: CouponPort | None = None,
    notifier: NotifierPort | None = None,
    navigate: Callable[[str], None] | None = None,
    clock: Callable[[], int] = now_ms,
) -> StorefrontSession:
    session_id = new_id()
    bind_session(session_id)

    storage = storage or JsonFileStorageAdapter(settings.storage_dir)
    notifier = notifier or LogNotifierAdapter()
    if catalog is None:
        catalog = _build_catalog_adapter(settings)
    if coupons is None:
        if not isinstance(catalog, CouponPort):
            raise ConfigurationError(
                f"The injected catalog ({type(catalog).__name__}) does not serve coupons; pass 'coupons'.",
                context={"catalog": type(catalog).__name__},
            )
        coupons = catalog

    def collection(key, item_type):
        return PersistentCollection(storage, key, item_type, write_through=settings.persistence_write_through)

    cart_items = collection(CART_STORAGE_KEY, CartLineItem)
    wishlist_items = collection(WISHLIST_STORAGE_KEY, WishlistEntry)
    compare_items = collection(COMPARE_STORAGE_KEY, CompareEntry)
    recent_items = collection(RECENTLY_VIEWED_STORAGE_KEY, RecentlyViewedEntry)

    wishlist = WishlistStore(wishlist_items, notifier, clock=clock)
    low_stock = LowStockAlertEngine(
        wishlist, catalog, notifier, navigate, threshold=settings.low_stock_threshold
    )
    price_drop = PriceDropAlertEngine(
        wishlist, catalog, notifier, navigate, currency_symbol=settings.currency_symbol
    )

    session = StorefrontSession(
        session_id=session_id,
        settings=settings,
        cart=CartStore(cart_items, notifier),
        wishlist=wishlist,
        compare=CompareStore(compare_items, notifier, capacity=settings.compare_capacity),
        recently_viewed=RecentlyViewedStore(
            recent_items, clock=clock, capacity=settings.recently_viewed_capacity
        ),
        low_stock_alerts=low_stock,
        price_drop_alerts=price_drop,
        scheduler=AlertScheduler(
            wishlist, [low_stock, price_drop], interval_seconds=settings.alert_poll_interval_seconds
        ),
        apply_coupon=ApplyCouponUseCase(coupons, notifier, currency_symbol=settings.currency_symbol),
        collections=[cart_items, wishlist_items, compare_items, recent_items],
    )
    logger.info(
        "Storefront session built",
        cart_lines=len(session.cart.items),
        wishlist_size=len(wishlist),
    )
    return session
