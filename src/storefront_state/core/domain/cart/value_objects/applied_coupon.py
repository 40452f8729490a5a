from dataclasses import dataclass

from storefront_state.core.domain.cart.value_objects.discount_type import DiscountType


@dataclass(frozen=True)
class AppliedCoupon:
    code: str
    discount_type: DiscountType
    discount_value: float
    max_discount: float | None
    calculated_discount: float
