import itertools

import pytest

from storefront_state.core.application.stores import (
    CartStore,
    CompareStore,
    PersistentCollection,
    RecentlyViewedStore,
    WishlistStore,
)
from storefront_state.core.domain.cart import CartLineItem
from storefront_state.core.domain.compare import CompareEntry
from storefront_state.core.domain.recently_viewed import RecentlyViewedEntry
from storefront_state.core.domain.wishlist import WishlistEntry
from storefront_state.infrastructure.configuration import Settings
from storefront_state.infrastructure.fakes import InMemoryCatalogGateway, RecordingNotifier
from storefront_state.infrastructure.storage import InMemoryStorageAdapter


class FakeClock:
    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int = 1000) -> None:
        self.now += ms


@pytest.fixture
def storage():
    return InMemoryStorageAdapter()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def catalog():
    return InMemoryCatalogGateway()


@pytest.fixture
def settings(tmp_path):
    return Settings(
        storage_dir=tmp_path / "storage",
        catalog_base_url="https://shop.supabase.co",
        catalog_api_key="mock_anon_key",
        alert_poll_interval_seconds=3600,
    )


@pytest.fixture
def cart_store(storage, notifier):
    ids = itertools.count(1)
    return CartStore(
        PersistentCollection(storage, "cart", CartLineItem),
        notifier,
        id_factory=lambda: f"line-{next(ids)}",
    )


@pytest.fixture
def wishlist_store(storage, notifier, clock):
    return WishlistStore(PersistentCollection(storage, "wishlist", WishlistEntry), notifier, clock=clock)


@pytest.fixture
def compare_store(storage, notifier):
    return CompareStore(PersistentCollection(storage, "compare", CompareEntry), notifier)


@pytest.fixture
def recently_viewed_store(storage, clock):
    return RecentlyViewedStore(PersistentCollection(storage, "recently-viewed", RecentlyViewedEntry), clock=clock)
