from dataclasses import dataclass


@dataclass(frozen=True)
class NewWishlistItem:
    product_id: str
    title: str
    price: float
    mrp: float
    image: str


@dataclass(frozen=True)
class WishlistEntry:
    """A wishlisted product.

    ``added_price`` is the baseline frozen at insertion time; price-drop
    detection compares live prices against it and nothing ever rewrites it.
    """

    id: str
    product_id: str
    title: str
    price: float
    mrp: float
    image: str
    added_price: float
    added_at: int

    @classmethod
    def capture(cls, entry_id: str, item: NewWishlistItem, added_at: int) -> "WishlistEntry":
        return cls(
            id=entry_id,
            product_id=item.product_id,
            title=item.title,
            price=item.price,
            mrp=item.mrp,
            image=item.image,
            added_price=item.price,
            added_at=added_at,
        )
