from storefront_state.infrastructure.catalog.dtos.catalog_row_dto import CatalogRowDto
from storefront_state.infrastructure.catalog.dtos.coupon_row_dto import CouponRowDto

__all__ = ["CatalogRowDto", "CouponRowDto"]
