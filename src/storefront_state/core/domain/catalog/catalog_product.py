from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogProduct:
    """Live catalog read of a product, as returned by the catalog collaborator."""

    id: str
    title: str
    images: tuple[str, ...] = ()
    stock: int = 0
    price: float = 0.0
    slug: str = ""
    is_active: bool = True

    @property
    def primary_image(self) -> str:
        return self.images[0] if self.images else ""
