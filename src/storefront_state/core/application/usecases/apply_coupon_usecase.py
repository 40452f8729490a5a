from collections.abc import Callable
from datetime import datetime

import structlog

from storefront_state.core.application.ports.common.exceptions import InfraError
from storefront_state.core.application.ports.coupon_port import CouponPort
from storefront_state.core.application.ports.notifier_port import NotifierPort
from storefront_state.core.domain.cart import AppliedCoupon, CouponRejectedError
from storefront_state.core.domain.notifications import NotificationLevel
from storefront_state.core.domain.shared import utc_now

logger = structlog.get_logger()


class ApplyCouponUseCase:
    """Validates a coupon code against the current subtotal.

    Every failure ends as a user-facing notice and a None result; nothing is
    raised to the caller.
    """

    def __init__(
        self,
        coupons: CouponPort,
        notifier: NotifierPort,
        clock: Callable[[], datetime] = utc_now,
        currency_symbol: str = "₹",
    ) -> None:
        self._coupons = coupons
        self._notifier = notifier
        self._clock = clock
        self._currency_symbol = currency_symbol

    async def execute(self, code: str, subtotal: float) -> AppliedCoupon | None:
        normalized = code.strip().upper()
        if not normalized:
            self._reject("Please enter a coupon code")
            return None

        try:
            coupon = await self._coupons.find_active_by_code(normalized)
        except InfraError as e:
            logger.warning("Coupon lookup failed", coupon_code=normalized, error_details=str(e))
            self._reject("Failed to apply coupon")
            return None

        if coupon is None:
            self._reject("Invalid coupon code")
            return None

        try:
            applied = coupon.apply_to(subtotal, self._clock(), self._currency_symbol)
        except CouponRejectedError as e:
            logger.info("Coupon rejected", coupon_code=normalized, reason=str(e))
            self._reject(str(e))
            return None

        self._notifier.notify("Coupon applied successfully!")
        return applied

    def _reject(self, message: str) -> None:
        self._notifier.notify(message, level=NotificationLevel.ERROR)
