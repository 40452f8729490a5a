from dataclasses import dataclass

from storefront_state.core.domain.cart.value_objects import AppliedCoupon

FREE_SHIPPING_THRESHOLD = 499
DELIVERY_CHARGE = 49


@dataclass(frozen=True)
class OrderSummary:
    """Price breakdown shown next to the cart. Always derived, never persisted."""

    subtotal: float
    item_count: int
    discount: float
    delivery_charge: float
    grand_total: float
    is_free_shipping: bool
    amount_to_free_shipping: float
    free_shipping_progress: float

    @classmethod
    def build(
        cls,
        subtotal: float,
        item_count: int,
        applied_coupon: AppliedCoupon | None = None,
        free_shipping_threshold: float = FREE_SHIPPING_THRESHOLD,
        delivery_charge: float = DELIVERY_CHARGE,
    ) -> "OrderSummary":
        discount = applied_coupon.calculated_discount if applied_coupon else 0
        is_free_shipping = subtotal >= free_shipping_threshold
        charge = 0 if is_free_shipping else delivery_charge
        if free_shipping_threshold > 0:
            progress = min(subtotal / free_shipping_threshold * 100, 100)
        else:
            progress = 100
        return cls(
            subtotal=subtotal,
            item_count=item_count,
            discount=discount,
            delivery_charge=charge,
            grand_total=subtotal - discount + charge,
            is_free_shipping=is_free_shipping,
            amount_to_free_shipping=max(free_shipping_threshold - subtotal, 0),
            free_shipping_progress=progress,
        )
