from storefront_state.core.domain.wishlist.wishlist_entry import NewWishlistItem, WishlistEntry

__all__ = ["NewWishlistItem", "WishlistEntry"]
