from storefront_state.infrastructure.resolution.container import (
    StorefrontSession,
    build_storefront_session,
)

__all__ = ["StorefrontSession", "build_storefront_session"]
