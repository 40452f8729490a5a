from storefront_state.core.application.ports.common.exceptions.infra_error import InfraError


class StorageError(InfraError):
    """Raised by storage adapters when a key cannot be read or written."""

    def __init__(self, message: str, *, key: str) -> None:
        super().__init__(message, context={"key": key})
        self.key = key
