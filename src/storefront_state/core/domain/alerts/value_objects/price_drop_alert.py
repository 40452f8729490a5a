import math
from dataclasses import dataclass

from storefront_state.core.domain.catalog import CatalogProduct
from storefront_state.core.domain.wishlist import WishlistEntry


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class PriceDropAlert:
    id: str
    product_id: str
    title: str
    image: str
    slug: str
    old_price: float
    new_price: float
    drop_percent: int

    @staticmethod
    def qualifies(entry: WishlistEntry, product: CatalogProduct) -> bool:
        return entry.added_price > 0 and product.price < entry.added_price

    @classmethod
    def from_baseline(cls, entry: WishlistEntry, product: CatalogProduct) -> "PriceDropAlert":
        old_price = entry.added_price
        new_price = product.price
        return cls(
            id=product.id,
            product_id=product.id,
            title=product.title,
            image=product.primary_image,
            slug=product.slug,
            old_price=old_price,
            new_price=new_price,
            drop_percent=_round_half_up((old_price - new_price) / old_price * 100),
        )
