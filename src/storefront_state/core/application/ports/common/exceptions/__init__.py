from storefront_state.core.application.ports.common.exceptions.catalog_fetch_error import (
    CatalogFetchError,
)
from storefront_state.core.application.ports.common.exceptions.configuration_error import (
    ConfigurationError,
)
from storefront_state.core.application.ports.common.exceptions.infra_error import InfraError
from storefront_state.core.application.ports.common.exceptions.storage_error import StorageError
from storefront_state.core.domain.shared.domain_error import DomainError

__all__ = ["CatalogFetchError", "ConfigurationError", "DomainError", "InfraError", "StorageError"]
