from storefront_state.core.application.stores.cart_store import CART_STORAGE_KEY, CartStore
from storefront_state.core.application.stores.compare_store import (
    COMPARE_STORAGE_KEY,
    MAX_COMPARE,
    CompareStore,
)
from storefront_state.core.application.stores.observable_store import ObservableStore
from storefront_state.core.application.stores.persistent_collection import PersistentCollection
from storefront_state.core.application.stores.recently_viewed_store import (
    MAX_RECENTLY_VIEWED,
    RECENTLY_VIEWED_STORAGE_KEY,
    RecentlyViewedStore,
)
from storefront_state.core.application.stores.wishlist_store import (
    WISHLIST_STORAGE_KEY,
    WishlistStore,
)

__all__ = [
    "CART_STORAGE_KEY",
    "COMPARE_STORAGE_KEY",
    "MAX_COMPARE",
    "MAX_RECENTLY_VIEWED",
    "RECENTLY_VIEWED_STORAGE_KEY",
    "WISHLIST_STORAGE_KEY",
    "CartStore",
    "CompareStore",
    "ObservableStore",
    "PersistentCollection",
    "RecentlyViewedStore",
    "WishlistStore",
]
