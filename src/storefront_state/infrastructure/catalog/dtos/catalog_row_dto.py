from pydantic import BaseModel, ConfigDict, field_validator

from storefront_state.core.domain.catalog import CatalogProduct


class CatalogRowDto(BaseModel):
    """One ``products`` row as served by PostgREST (numeric columns may arrive as strings)."""

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str = ""
    images: list[str] | None = None
    stock: int | None = None
    price: float = 0.0
    slug: str = ""
    is_active: bool = True

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value):
        return str(value)

    def to_domain(self) -> CatalogProduct:
        return CatalogProduct(
            id=self.id,
            title=self.title,
            images=tuple(self.images or ()),
            stock=self.stock or 0,
            price=self.price,
            slug=self.slug,
            is_active=self.is_active,
        )
