from storefront_state.core.domain.shared.domain_error import DomainError


class CouponRejectedError(DomainError):
    """Raised when a coupon exists but cannot be applied to the current cart.

    The message is user-facing and is surfaced verbatim as a notice.
    """
