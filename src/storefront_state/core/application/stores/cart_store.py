from collections.abc import Callable
from dataclasses import replace

import structlog

from storefront_state.core.application.ports.notifier_port import NotifierPort
from storefront_state.core.application.stores.observable_store import ObservableStore
from storefront_state.core.application.stores.persistent_collection import PersistentCollection
from storefront_state.core.domain.cart import AppliedCoupon, CartLineItem, NewCartItem, OrderSummary
from storefront_state.core.domain.shared import new_id

logger = structlog.get_logger()

CART_STORAGE_KEY = "cart"


class CartStore(ObservableStore):
    """Quantity- and variant-aware cart lines with derived totals."""

    def __init__(
        self,
        collection: PersistentCollection[CartLineItem],
        notifier: NotifierPort,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        super().__init__()
        self._collection = collection
        self._notifier = notifier
        self._id_factory = id_factory
        self._collection.conform(_conform_lines)

    @property
    def items(self) -> tuple[CartLineItem, ...]:
        return tuple(self._collection.items)

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self._collection.items)

    @property
    def subtotal(self) -> float:
        return sum(item.line_total for item in self._collection.items)

    def get(self, line_id: str) -> CartLineItem | None:
        return next((item for item in self._collection.items if item.id == line_id), None)

    def add_item(self, item: NewCartItem, quantity: int = 1) -> CartLineItem | None:
        """Adds ``quantity`` units, merging into an existing (product, variant) line."""
        if quantity < 1:
            logger.warning("Ignoring cart add with non-positive quantity", product_id=item.product_id, quantity=quantity)
            return None

        items = self._collection.items
        index = next(
            (i for i, line in enumerate(items) if line.matches(item.product_id, item.variant)),
            None,
        )
        if index is not None:
            line = replace(items[index], quantity=items[index].quantity + quantity)
            items[index] = line
        else:
            line = CartLineItem.from_new_item(self._id_factory(), item, quantity)
            items.append(line)

        self._collection.replace(items)
        self._notifier.notify("Added to cart!")
        self._emit_change()
        return line

    def remove_item(self, line_id: str) -> None:
        items = self._collection.items
        remaining = [item for item in items if item.id != line_id]
        if len(remaining) == len(items):
            logger.info("Cart line not found, nothing to remove", line_id=line_id)
            return

        self._collection.replace(remaining)
        self._notifier.notify("Removed from cart")
        self._emit_change()

    def update_quantity(self, line_id: str, quantity: int) -> None:
        if quantity < 1:
            self.remove_item(line_id)
            return

        items = self._collection.items
        updated = [replace(item, quantity=quantity) if item.id == line_id else item for item in items]
        if updated == items:
            return

        self._collection.replace(updated)
        self._emit_change()

    def clear_cart(self) -> None:
        self._collection.replace([])
        self._emit_change()

    def order_summary(
        self,
        applied_coupon: AppliedCoupon | None = None,
        free_shipping_threshold: float | None = None,
        delivery_charge: float | None = None,
    ) -> OrderSummary:
        options = {}
        if free_shipping_threshold is not None:
            options["free_shipping_threshold"] = free_shipping_threshold
        if delivery_charge is not None:
            options["delivery_charge"] = delivery_charge
        return OrderSummary.build(self.subtotal, self.item_count, applied_coupon, **options)


def _conform_lines(lines: list[CartLineItem]) -> list[CartLineItem]:
    # One line per (product_id, variant), quantities >= 1.
    merged: list[CartLineItem] = []
    for line in lines:
        if line.quantity < 1:
            continue
        index = next(
            (i for i, kept in enumerate(merged) if kept.matches(line.product_id, line.variant)),
            None,
        )
        if index is None:
            merged.append(line)
        else:
            merged[index] = replace(merged[index], quantity=merged[index].quantity + line.quantity)
    return merged
