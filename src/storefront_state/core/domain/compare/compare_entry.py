from dataclasses import dataclass


@dataclass(frozen=True)
class CompareEntry:
    id: str
    title: str
    price: float
    mrp: float
    image: str
    slug: str = ""
    rating: float | None = None
    rating_count: int | None = None
    stock: int | None = None
    brand: str | None = None
    category: str | None = None
    sku: str | None = None
    description: str | None = None
