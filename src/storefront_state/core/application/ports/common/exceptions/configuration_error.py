from storefront_state.core.domain.shared.domain_error import DomainError


class ConfigurationError(DomainError):
    """Settings are missing or inconsistent for the requested wiring."""
