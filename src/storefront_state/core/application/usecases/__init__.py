from storefront_state.core.application.usecases.apply_coupon_usecase import ApplyCouponUseCase

__all__ = ["ApplyCouponUseCase"]
