from abc import ABC, abstractmethod

from storefront_state.core.domain.cart import Coupon


class CouponPort(ABC):
    @abstractmethod
    async def find_active_by_code(self, code: str) -> Coupon | None:
        """Looks up an active coupon by its normalized code. Raises ``CatalogFetchError``."""
