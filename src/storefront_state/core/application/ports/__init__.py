from storefront_state.core.application.ports.catalog_port import CatalogPort
from storefront_state.core.application.ports.coupon_port import CouponPort
from storefront_state.core.application.ports.notifier_port import NotifierPort
from storefront_state.core.application.ports.storage_port import StoragePort

__all__ = ["CatalogPort", "CouponPort", "NotifierPort", "StoragePort"]
