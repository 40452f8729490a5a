from storefront_state.core.domain.recently_viewed.recently_viewed_entry import (
    RecentlyViewedEntry,
    ViewedProduct,
)

__all__ = ["RecentlyViewedEntry", "ViewedProduct"]
