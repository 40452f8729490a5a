from storefront_state.infrastructure.configuration.main_settings import Settings

__all__ = ["Settings"]
