from storefront_state.infrastructure.observability.logging.storefront_processor import (
    storefront_fields_processor,
)

__all__ = ["storefront_fields_processor"]
