from collections.abc import Callable

from storefront_state.core.application.ports.notifier_port import NotifierPort
from storefront_state.core.application.stores.observable_store import ObservableStore
from storefront_state.core.application.stores.persistent_collection import (
    PersistentCollection,
    first_per_key,
)
from storefront_state.core.domain.shared import new_id, now_ms
from storefront_state.core.domain.wishlist import NewWishlistItem, WishlistEntry

WISHLIST_STORAGE_KEY = "wishlist"


class WishlistStore(ObservableStore):
    """Products saved for later, one entry per product, with a frozen price baseline."""

    def __init__(
        self,
        collection: PersistentCollection[WishlistEntry],
        notifier: NotifierPort,
        clock: Callable[[], int] = now_ms,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        super().__init__()
        self._collection = collection
        self._notifier = notifier
        self._clock = clock
        self._id_factory = id_factory
        self._collection.conform(lambda entries: first_per_key(entries, lambda e: e.product_id))

    @property
    def items(self) -> tuple[WishlistEntry, ...]:
        return tuple(self._collection.items)

    @property
    def product_ids(self) -> tuple[str, ...]:
        return tuple(entry.product_id for entry in self._collection.items)

    def __len__(self) -> int:
        return len(self._collection.items)

    def is_in_wishlist(self, product_id: str) -> bool:
        return any(entry.product_id == product_id for entry in self._collection.items)

    def entry_for(self, product_id: str) -> WishlistEntry | None:
        return next((e for e in self._collection.items if e.product_id == product_id), None)

    def toggle_wishlist(self, item: NewWishlistItem) -> bool:
        """Removes the product if present, otherwise adds it. Returns the new membership."""
        if self.is_in_wishlist(item.product_id):
            self.remove_item(item.product_id)
            return False

        entry = WishlistEntry.capture(self._id_factory(), item, self._clock())
        self._collection.replace([*self._collection.items, entry])
        self._notifier.notify("Added to wishlist!")
        self._emit_change()
        return True

    def remove_item(self, product_id: str) -> None:
        items = self._collection.items
        remaining = [entry for entry in items if entry.product_id != product_id]
        if len(remaining) == len(items):
            return

        self._collection.replace(remaining)
        self._notifier.notify("Removed from wishlist")
        self._emit_change()

    def clear_wishlist(self) -> None:
        self._collection.replace([])
        self._emit_change()
