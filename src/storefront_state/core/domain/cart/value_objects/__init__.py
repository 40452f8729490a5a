from storefront_state.core.domain.cart.value_objects.applied_coupon import AppliedCoupon
from storefront_state.core.domain.cart.value_objects.discount_type import DiscountType

__all__ = ["AppliedCoupon", "DiscountType"]
