import asyncio
from collections.abc import Iterable, Sequence
from dataclasses import replace

from storefront_state.core.application.ports.catalog_port import CatalogPort
from storefront_state.core.application.ports.common.exceptions import CatalogFetchError
from storefront_state.core.application.ports.coupon_port import CouponPort
from storefront_state.core.domain.cart import Coupon
from storefront_state.core.domain.catalog import CatalogProduct


class InMemoryCatalogGateway(CatalogPort, CouponPort):
    """
    Fake catalog for testing/local development.
    Satisfies CatalogPort and CouponPort; can be told to fail, or to hold
    fetches open until the next queued event in ``holds`` is set.
    """

    def __init__(
        self,
        products: Iterable[CatalogProduct] = (),
        coupons: Iterable[Coupon] = (),
    ) -> None:
        self.products: dict[str, CatalogProduct] = {p.id: p for p in products}
        self.coupons: dict[str, Coupon] = {c.code: c for c in coupons}
        self.requests: list[tuple[str, ...]] = []
        self.failure: CatalogFetchError | None = None
        self.holds: list[asyncio.Event] = []

    def upsert(self, product: CatalogProduct) -> None:
        self.products[product.id] = product

    def set_price(self, product_id: str, price: float) -> None:
        self.products[product_id] = replace(self.products[product_id], price=price)

    def set_stock(self, product_id: str, stock: int) -> None:
        self.products[product_id] = replace(self.products[product_id], stock=stock)

    async def fetch_by_ids(self, ids: Sequence[str]) -> list[CatalogProduct]:
        self.requests.append(tuple(ids))
        # Snapshot now so held fetches return what was current when issued
        snapshot = [self.products[i] for i in ids if i in self.products]
        failure = self.failure
        if self.holds:
            await self.holds.pop(0).wait()
        if failure is not None:
            raise failure
        return snapshot

    async def find_active_by_code(self, code: str) -> Coupon | None:
        if self.failure is not None:
            raise self.failure
        return self.coupons.get(code)
