from datetime import datetime

from pydantic import BaseModel, ConfigDict

from storefront_state.core.domain.cart import Coupon, DiscountType


class CouponRowDto(BaseModel):
    model_config = ConfigDict(extra="ignore")

    code: str
    discount_type: DiscountType
    discount_value: float
    max_discount: float | None = None
    min_cart_value: float | None = None
    usage_limit: int | None = None
    used_count: int | None = None
    starts_at: datetime | None = None
    expires_at: datetime | None = None

    def to_domain(self) -> Coupon:
        return Coupon(
            code=self.code,
            discount_type=self.discount_type,
            discount_value=self.discount_value,
            max_discount=self.max_discount,
            min_cart_value=self.min_cart_value,
            usage_limit=self.usage_limit,
            used_count=self.used_count or 0,
            starts_at=self.starts_at,
            expires_at=self.expires_at,
        )
