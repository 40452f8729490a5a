import asyncio

import pytest

from storefront_state.core.application.alerts import PriceDropAlertEngine
from storefront_state.core.application.ports.common.exceptions import CatalogFetchError
from storefront_state.core.domain.alerts import PriceDropAlert
from storefront_state.core.domain.catalog import CatalogProduct
from storefront_state.core.domain.notifications import NotificationLevel
from storefront_state.core.domain.wishlist import NewWishlistItem


def _wish(product_id: str, price: float) -> NewWishlistItem:
    return NewWishlistItem(product_id=product_id, title=product_id, price=price, mrp=price, image="")


def _live(product_id: str, price: float, is_active: bool = True) -> CatalogProduct:
    return CatalogProduct(
        id=product_id,
        title=product_id,
        images=(f"https://cdn.example.com/{product_id}.jpg",),
        stock=10,
        price=price,
        slug=f"slug-{product_id}",
        is_active=is_active,
    )


@pytest.fixture
def engine(wishlist_store, catalog, notifier):
    return PriceDropAlertEngine(wishlist_store, catalog, notifier)


@pytest.mark.asyncio
async def test_drop_detected_and_notified_once(engine, wishlist_store, catalog, notifier):
    wishlist_store.toggle_wishlist(_wish("A", 100))
    wishlist_store.toggle_wishlist(_wish("B", 200))
    catalog.upsert(_live("A", 80))
    catalog.upsert(_live("B", 200))
    notifier.clear()

    alerts = await engine.reconcile()

    assert alerts == (
        PriceDropAlert(
            id="A",
            product_id="A",
            title="A",
            image="https://cdn.example.com/A.jpg",
            slug="slug-A",
            old_price=100,
            new_price=80,
            drop_percent=20,
        ),
    )
    assert notifier.messages == ['Price drop! "A" is now ₹80 (20% off)']
    assert notifier.notifications[0].level is NotificationLevel.SUCCESS
    assert notifier.notifications[0].duration_ms == 6000

    await engine.reconcile()

    assert len(notifier.notifications) == 1
    assert "A" in engine.ledger


@pytest.mark.asyncio
async def test_sorted_by_drop_percent_with_stable_ties(engine, wishlist_store, catalog):
    for product_id in ("small", "tie1", "big", "tie2"):
        wishlist_store.toggle_wishlist(_wish(product_id, 100))
    catalog.upsert(_live("small", 95))
    catalog.upsert(_live("tie1", 70))
    catalog.upsert(_live("big", 40))
    catalog.upsert(_live("tie2", 70))

    alerts = await engine.reconcile()

    assert [a.id for a in alerts] == ["big", "tie1", "tie2", "small"]
    assert [a.drop_percent for a in alerts] == [60, 30, 30, 5]


@pytest.mark.asyncio
async def test_drop_percent_rounds_half_up(engine, wishlist_store, catalog):
    wishlist_store.toggle_wishlist(_wish("A", 8))
    catalog.upsert(_live("A", 7))

    alerts = await engine.reconcile()

    assert alerts[0].drop_percent == 13


@pytest.mark.asyncio
async def test_inactive_and_unchanged_products_are_ignored(engine, wishlist_store, catalog, notifier):
    wishlist_store.toggle_wishlist(_wish("gone", 100))
    wishlist_store.toggle_wishlist(_wish("same", 100))
    wishlist_store.toggle_wishlist(_wish("higher", 100))
    catalog.upsert(_live("gone", 10, is_active=False))
    catalog.upsert(_live("same", 100))
    catalog.upsert(_live("higher", 120))
    notifier.clear()

    assert await engine.reconcile() == ()
    assert notifier.messages == []


@pytest.mark.asyncio
async def test_empty_wishlist_skips_fetch(engine, catalog):
    assert await engine.reconcile() == ()
    assert catalog.requests == []


@pytest.mark.asyncio
async def test_fetch_failure_skips_cycle_and_keeps_ledger(engine, wishlist_store, catalog, notifier):
    wishlist_store.toggle_wishlist(_wish("A", 100))
    catalog.upsert(_live("A", 50))
    catalog.failure = CatalogFetchError("catalog down", retryable=True, status_code=503)
    notifier.clear()

    assert await engine.reconcile() is None
    assert len(engine.ledger) == 0
    assert notifier.messages == []

    catalog.failure = None
    alerts = await engine.reconcile()

    assert [a.id for a in alerts] == ["A"]
    assert len(notifier.messages) == 1


@pytest.mark.asyncio
async def test_requalifying_item_is_not_renotified(engine, wishlist_store, catalog, notifier):
    wishlist_store.toggle_wishlist(_wish("A", 100))
    catalog.upsert(_live("A", 90))
    notifier.clear()

    await engine.reconcile()
    catalog.set_price("A", 100)
    assert await engine.reconcile() == ()
    catalog.set_price("A", 70)
    alerts = await engine.reconcile()

    assert alerts[0].drop_percent == 30
    assert len(notifier.messages) == 1


@pytest.mark.asyncio
async def test_result_for_changed_wishlist_is_discarded(engine, wishlist_store, catalog, notifier):
    wishlist_store.toggle_wishlist(_wish("A", 100))
    catalog.upsert(_live("A", 50))
    hold = asyncio.Event()
    catalog.holds.append(hold)
    notifier.clear()

    pending = asyncio.create_task(engine.reconcile())
    await asyncio.sleep(0)
    wishlist_store.toggle_wishlist(_wish("B", 10))
    notifier.clear()
    hold.set()

    assert await pending is None
    assert engine.alerts == ()
    assert notifier.messages == []
    assert len(engine.ledger) == 0


@pytest.mark.asyncio
async def test_older_fetch_never_overwrites_newer(engine, wishlist_store, catalog):
    wishlist_store.toggle_wishlist(_wish("A", 100))
    catalog.upsert(_live("A", 90))
    first_hold, second_hold = asyncio.Event(), asyncio.Event()
    catalog.holds.extend([first_hold, second_hold])

    older = asyncio.create_task(engine.reconcile())
    await asyncio.sleep(0)
    catalog.set_price("A", 60)
    newer = asyncio.create_task(engine.reconcile())
    await asyncio.sleep(0)

    second_hold.set()
    newer_alerts = await newer
    first_hold.set()

    assert await older is None
    assert newer_alerts[0].new_price == 60
    assert engine.alerts[0].new_price == 60


@pytest.mark.asyncio
async def test_view_action_navigates_to_product(wishlist_store, catalog, notifier):
    visited = []
    engine = PriceDropAlertEngine(wishlist_store, catalog, notifier, navigate=visited.append)
    wishlist_store.toggle_wishlist(_wish("A", 100))
    catalog.upsert(_live("A", 50))
    notifier.clear()

    await engine.reconcile()
    action = notifier.notifications[0].action
    action.on_activate()

    assert action.label == "View"
    assert visited == ["/product/slug-A"]


@pytest.mark.asyncio
async def test_baseline_is_not_moved_by_catalog_prices(engine, wishlist_store, catalog):
    wishlist_store.toggle_wishlist(_wish("A", 100))
    catalog.upsert(_live("A", 40))

    await engine.reconcile()

    assert wishlist_store.entry_for("A").added_price == 100
