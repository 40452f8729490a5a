from collections.abc import Callable

from storefront_state.core.application.stores.observable_store import ObservableStore
from storefront_state.core.application.stores.persistent_collection import (
    PersistentCollection,
    first_per_key,
)
from storefront_state.core.domain.recently_viewed import RecentlyViewedEntry, ViewedProduct
from storefront_state.core.domain.shared import now_ms

RECENTLY_VIEWED_STORAGE_KEY = "recently-viewed"
MAX_RECENTLY_VIEWED = 12


class RecentlyViewedStore(ObservableStore):
    """Most-recently-viewed products, newest first, bounded to ``capacity``."""

    def __init__(
        self,
        collection: PersistentCollection[RecentlyViewedEntry],
        clock: Callable[[], int] = now_ms,
        capacity: int = MAX_RECENTLY_VIEWED,
    ) -> None:
        super().__init__()
        self._collection = collection
        self._clock = clock
        self.capacity = capacity
        self._collection.conform(lambda entries: first_per_key(entries, lambda p: p.id)[:capacity])

    @property
    def products(self) -> tuple[RecentlyViewedEntry, ...]:
        return tuple(self._collection.items)

    def add_product(self, product: ViewedProduct) -> RecentlyViewedEntry:
        entry = RecentlyViewedEntry.stamp(product, self._clock())
        others = [p for p in self._collection.items if p.id != product.id]
        self._collection.replace([entry, *others][: self.capacity])
        self._emit_change()
        return entry

    def clear_history(self) -> None:
        self._collection.clear(remove_key=True)
        self._emit_change()
