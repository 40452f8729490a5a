from dataclasses import dataclass
from datetime import datetime

from storefront_state.core.domain.cart.coupon_rejected_error import CouponRejectedError
from storefront_state.core.domain.cart.value_objects import AppliedCoupon, DiscountType
from storefront_state.core.domain.shared.money import format_amount


@dataclass(frozen=True)
class Coupon:
    code: str
    discount_type: DiscountType
    discount_value: float
    max_discount: float | None = None
    min_cart_value: float | None = None
    usage_limit: int | None = None
    used_count: int = 0
    starts_at: datetime | None = None
    expires_at: datetime | None = None

    def apply_to(self, subtotal: float, now: datetime, currency_symbol: str = "₹") -> AppliedCoupon:
        """Validates the coupon against the cart and computes its discount.

        Checks run in a fixed order (activation window, usage limit, minimum
        cart value) and the first failure wins. Zero-valued limits are treated
        as "no limit".
        """
        if self.starts_at and self.starts_at > now:
            raise CouponRejectedError("This coupon is not yet active", context={"code": self.code})
        if self.expires_at and self.expires_at < now:
            raise CouponRejectedError("This coupon has expired", context={"code": self.code})
        if self.usage_limit and self.used_count >= self.usage_limit:
            raise CouponRejectedError(
                "This coupon has reached its usage limit", context={"code": self.code}
            )
        if self.min_cart_value and subtotal < self.min_cart_value:
            raise CouponRejectedError(
                f"Minimum cart value of {currency_symbol}{format_amount(self.min_cart_value)} required",
                context={"code": self.code, "subtotal": subtotal},
            )

        return AppliedCoupon(
            code=self.code,
            discount_type=self.discount_type,
            discount_value=self.discount_value,
            max_discount=self.max_discount,
            calculated_discount=self.calculate_discount(subtotal),
        )

    def calculate_discount(self, subtotal: float) -> float:
        if self.discount_type == DiscountType.PERCENT:
            discount = subtotal * self.discount_value / 100
            if self.max_discount and discount > self.max_discount:
                return self.max_discount
            return discount
        return self.discount_value
