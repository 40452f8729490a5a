from dataclasses import dataclass


@dataclass(frozen=True)
class NewCartItem:
    """A product selection about to enter the cart (no line id yet)."""

    product_id: str
    title: str
    price: float
    mrp: float
    image: str
    variant: str | None = None


@dataclass(frozen=True)
class CartLineItem:
    """One cart line. Identity is (product_id, variant); quantity is always >= 1."""

    id: str
    product_id: str
    title: str
    price: float
    mrp: float
    quantity: int
    image: str
    variant: str | None = None

    @property
    def line_total(self) -> float:
        return self.price * self.quantity

    def matches(self, product_id: str, variant: str | None) -> bool:
        return self.product_id == product_id and self.variant == variant

    @classmethod
    def from_new_item(cls, line_id: str, item: NewCartItem, quantity: int) -> "CartLineItem":
        return cls(
            id=line_id,
            product_id=item.product_id,
            title=item.title,
            price=item.price,
            mrp=item.mrp,
            quantity=quantity,
            image=item.image,
            variant=item.variant,
        )
