from storefront_state.core.application.ports.notifier_port import NotifierPort
from storefront_state.core.application.stores.observable_store import ObservableStore
from storefront_state.core.application.stores.persistent_collection import (
    PersistentCollection,
    first_per_key,
)
from storefront_state.core.domain.compare import CompareAddOutcome, CompareEntry
from storefront_state.core.domain.notifications import NotificationLevel

COMPARE_STORAGE_KEY = "compare"
MAX_COMPARE = 3


class CompareStore(ObservableStore):
    """Bounded comparison set. A full set rejects new products; nothing is evicted."""

    def __init__(
        self,
        collection: PersistentCollection[CompareEntry],
        notifier: NotifierPort,
        capacity: int = MAX_COMPARE,
    ) -> None:
        super().__init__()
        self._collection = collection
        self._notifier = notifier
        self.capacity = capacity
        self._collection.conform(lambda entries: first_per_key(entries, lambda p: p.id)[:capacity])

    @property
    def products(self) -> tuple[CompareEntry, ...]:
        return tuple(self._collection.items)

    @property
    def can_add(self) -> bool:
        return len(self._collection.items) < self.capacity

    def is_in_compare(self, product_id: str) -> bool:
        return any(p.id == product_id for p in self._collection.items)

    def add_product(self, product: CompareEntry) -> CompareAddOutcome:
        items = self._collection.items
        if len(items) >= self.capacity:
            self._notifier.notify(
                f"You can only compare up to {self.capacity} products",
                level=NotificationLevel.ERROR,
            )
            return CompareAddOutcome.FULL
        if self.is_in_compare(product.id):
            self._notifier.notify("Product already in comparison", level=NotificationLevel.INFO)
            return CompareAddOutcome.DUPLICATE

        self._collection.replace([*items, product])
        self._notifier.notify("Added to compare")
        self._emit_change()
        return CompareAddOutcome.ADDED

    def remove_product(self, product_id: str) -> None:
        items = self._collection.items
        remaining = [p for p in items if p.id != product_id]
        if len(remaining) == len(items):
            return
        self._collection.replace(remaining)
        self._emit_change()

    def clear_all(self) -> None:
        self._collection.replace([])
        self._emit_change()
