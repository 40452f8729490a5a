from collections.abc import Sequence

from pydantic import ValidationError

from storefront_state.core.application.ports.catalog_port import CatalogPort
from storefront_state.core.application.ports.common.exceptions import CatalogFetchError
from storefront_state.core.application.ports.coupon_port import CouponPort
from storefront_state.core.domain.cart import Coupon
from storefront_state.core.domain.catalog import CatalogProduct
from storefront_state.infrastructure.catalog.clients.supabase_http_client import SupabaseHttpClient
from storefront_state.infrastructure.catalog.dtos import CatalogRowDto, CouponRowDto
from storefront_state.infrastructure.common.retry import RetryPolicy

CATALOG_FIELDS = ("id", "title", "images", "stock", "price", "slug", "is_active")


def _in_filter(values: Sequence[str]) -> str:
    quoted = ",".join('"' + v.replace('"', '\\"') + '"' for v in values)
    return f"in.({quoted})"


class SupabaseCatalogAdapter(CatalogPort, CouponPort):
    def __init__(
        self,
        client: SupabaseHttpClient,
        retry_policy: RetryPolicy | None = None,
        table: str = "products",
        coupon_table: str = "coupons",
    ):
        self._client = client
        self._retry = retry_policy or RetryPolicy()
        self._table = table
        self._coupon_table = coupon_table

    async def fetch_by_ids(self, ids: Sequence[str]) -> list[CatalogProduct]:
        if not ids:
            return []
        params = {"select": ",".join(CATALOG_FIELDS), "id": _in_filter(ids)}
        rows = await self._retry.run(lambda: self._client.select(self._table, params))
        try:
            return [CatalogRowDto.model_validate(row).to_domain() for row in rows]
        except ValidationError as e:
            raise CatalogFetchError(f"Unexpected row shape in '{self._table}': {e.error_count()} errors") from e

    async def find_active_by_code(self, code: str) -> Coupon | None:
        params = {"select": "*", "code": f"eq.{code}", "is_active": "eq.true", "limit": "1"}
        rows = await self._retry.run(lambda: self._client.select(self._coupon_table, params))
        if not rows:
            return None
        try:
            return CouponRowDto.model_validate(rows[0]).to_domain()
        except ValidationError as e:
            raise CatalogFetchError(f"Unexpected row shape in '{self._coupon_table}'") from e
