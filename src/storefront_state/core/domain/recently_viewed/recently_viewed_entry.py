from dataclasses import dataclass


@dataclass(frozen=True)
class ViewedProduct:
    id: str
    slug: str
    title: str
    price: float
    mrp: float
    image: str


@dataclass(frozen=True)
class RecentlyViewedEntry:
    id: str
    slug: str
    title: str
    price: float
    mrp: float
    image: str
    viewed_at: int

    @classmethod
    def stamp(cls, product: ViewedProduct, viewed_at: int) -> "RecentlyViewedEntry":
        return cls(
            id=product.id,
            slug=product.slug,
            title=product.title,
            price=product.price,
            mrp=product.mrp,
            image=product.image,
            viewed_at=viewed_at,
        )
