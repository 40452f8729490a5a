from storefront_state.core.domain.cart.cart_line_item import CartLineItem, NewCartItem
from storefront_state.core.domain.cart.coupon import Coupon
from storefront_state.core.domain.cart.coupon_rejected_error import CouponRejectedError
from storefront_state.core.domain.cart.order_summary import OrderSummary
from storefront_state.core.domain.cart.value_objects import AppliedCoupon, DiscountType

__all__ = [
    "AppliedCoupon",
    "CartLineItem",
    "Coupon",
    "CouponRejectedError",
    "DiscountType",
    "NewCartItem",
    "OrderSummary",
]
