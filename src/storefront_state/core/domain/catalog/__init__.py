from storefront_state.core.domain.catalog.catalog_product import CatalogProduct

__all__ = ["CatalogProduct"]
