import json

from storefront_state.core.application.stores import CartStore, PersistentCollection
from storefront_state.core.domain.cart import AppliedCoupon, CartLineItem, DiscountType, NewCartItem
from storefront_state.infrastructure.fakes import RecordingNotifier
from storefront_state.infrastructure.storage import InMemoryStorageAdapter


def _item(product_id: str = "p1", price: float = 250.0, variant: str | None = None) -> NewCartItem:
    return NewCartItem(
        product_id=product_id,
        title=f"Product {product_id}",
        price=price,
        mrp=price + 50,
        image="https://cdn.example.com/p.jpg",
        variant=variant,
    )


def test_same_product_and_variant_merge_quantities(cart_store):
    for quantity in (1, 2, 4):
        cart_store.add_item(_item(variant="M"), quantity)

    assert len(cart_store.items) == 1
    assert cart_store.items[0].quantity == 7
    assert cart_store.items[0].id == "line-1"


def test_variant_participates_in_line_identity(cart_store):
    cart_store.add_item(_item(variant="M"))
    cart_store.add_item(_item(variant="L"))
    cart_store.add_item(_item())

    assert [line.variant for line in cart_store.items] == ["M", "L", None]


def test_update_quantity_zero_is_remove(storage, notifier):
    def build(key):
        store = CartStore(PersistentCollection(storage, key, CartLineItem), notifier, id_factory=lambda: "line-x")
        store.add_item(_item(), 2)
        return store

    updated = build("cart-a")
    removed = build("cart-b")

    updated.update_quantity("line-x", 0)
    removed.remove_item("line-x")

    assert updated.items == removed.items == ()
    assert storage.data["cart-a"] == storage.data["cart-b"] == "[]"


def test_update_quantity_negative_deletes_line(cart_store):
    line = cart_store.add_item(_item())
    cart_store.update_quantity(line.id, -3)
    assert cart_store.items == ()


def test_update_quantity_sets_value(cart_store):
    line = cart_store.add_item(_item())
    cart_store.update_quantity(line.id, 5)
    assert cart_store.get(line.id).quantity == 5


def test_derived_totals_follow_every_mutation(cart_store):
    a = cart_store.add_item(_item("a", price=100.0), 2)
    cart_store.add_item(_item("b", price=35.5), 3)
    assert cart_store.item_count == 5
    assert cart_store.subtotal == 306.5

    cart_store.update_quantity(a.id, 1)
    assert cart_store.subtotal == sum(line.price * line.quantity for line in cart_store.items) == 206.5

    cart_store.remove_item(a.id)
    assert cart_store.item_count == 3
    assert cart_store.subtotal == 106.5

    cart_store.clear_cart()
    assert (cart_store.item_count, cart_store.subtotal) == (0, 0)


def test_confirmations(cart_store, notifier):
    line = cart_store.add_item(_item())
    cart_store.remove_item(line.id)
    assert notifier.messages == ["Added to cart!", "Removed from cart"]


def test_removing_unknown_line_is_silent(cart_store, notifier):
    cart_store.remove_item("nope")
    assert notifier.messages == []


def test_non_positive_add_is_ignored(cart_store, notifier):
    assert cart_store.add_item(_item(), 0) is None
    assert cart_store.items == ()
    assert notifier.messages == []


def test_never_persists_zero_quantity(cart_store, storage):
    line = cart_store.add_item(_item(), 3)
    cart_store.update_quantity(line.id, 0)
    assert all(row["quantity"] >= 1 for row in json.loads(storage.data["cart"]))


def test_rehydrates_lines():
    storage = InMemoryStorageAdapter()
    first = CartStore(PersistentCollection(storage, "cart", CartLineItem), RecordingNotifier())
    first.add_item(_item("p9", price=10.0), 4)

    second = CartStore(PersistentCollection(storage, "cart", CartLineItem), RecordingNotifier())

    assert second.items == first.items
    assert second.subtotal == 40.0


def test_subscribers_see_each_mutation(cart_store):
    seen = []
    unsubscribe = cart_store.subscribe(lambda store: seen.append(store.item_count))

    line = cart_store.add_item(_item(), 2)
    cart_store.update_quantity(line.id, 3)
    unsubscribe()
    cart_store.clear_cart()

    assert seen == [2, 3]


def test_order_summary_uses_cart_totals(cart_store):
    cart_store.add_item(_item(price=200.0), 2)
    coupon = AppliedCoupon(
        code="SAVE10",
        discount_type=DiscountType.PERCENT,
        discount_value=10,
        max_discount=None,
        calculated_discount=40.0,
    )

    summary = cart_store.order_summary(coupon)

    assert summary.subtotal == 400.0
    assert summary.item_count == 2
    assert summary.delivery_charge == 49
    assert summary.grand_total == 409.0


def _stored_line(line_id: str, product_id: str, quantity: int, variant: str | None = None) -> dict:
    return {
        "id": line_id,
        "product_id": product_id,
        "title": f"Product {product_id}",
        "price": 100.0,
        "mrp": 120.0,
        "quantity": quantity,
        "image": "",
        "variant": variant,
    }


def test_rehydrated_lines_are_repaired():
    storage = InMemoryStorageAdapter(
        {
            "cart": json.dumps(
                [
                    _stored_line("l1", "p1", 2, "M"),
                    _stored_line("l2", "p2", 0),
                    _stored_line("l3", "p1", 3, "M"),
                    _stored_line("l4", "p1", 1, "L"),
                ]
            )
        }
    )

    cart = CartStore(PersistentCollection(storage, "cart", CartLineItem), RecordingNotifier())

    assert [(line.id, line.quantity) for line in cart.items] == [("l1", 5), ("l4", 1)]
    assert cart.item_count == 6
    assert [line["id"] for line in json.loads(storage.data["cart"])] == ["l1", "l4"]


def test_valid_stored_cart_is_not_rewritten():
    raw = json.dumps([_stored_line("l1", "p1", 2)])
    storage = InMemoryStorageAdapter({"cart": raw})

    CartStore(PersistentCollection(storage, "cart", CartLineItem), RecordingNotifier())

    assert storage.data["cart"] == raw
