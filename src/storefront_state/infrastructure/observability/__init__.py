from storefront_state.infrastructure.observability.logger_factory_service import (
    bind_session,
    configure_logging,
    get_logger,
)

__all__ = ["bind_session", "configure_logging", "get_logger"]
