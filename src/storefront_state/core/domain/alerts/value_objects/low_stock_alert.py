from dataclasses import dataclass

from storefront_state.core.domain.catalog import CatalogProduct

LOW_STOCK_THRESHOLD = 5


@dataclass(frozen=True)
class LowStockAlert:
    id: str
    title: str
    image: str
    stock: int
    slug: str

    @staticmethod
    def qualifies(stock: int, threshold: int = LOW_STOCK_THRESHOLD) -> bool:
        # Out-of-stock is not "low stock".
        return 0 < stock <= threshold

    @classmethod
    def from_product(cls, product: CatalogProduct) -> "LowStockAlert":
        return cls(
            id=product.id,
            title=product.title,
            image=product.primary_image,
            stock=product.stock,
            slug=product.slug,
        )
