from storefront_state.core.application.ports.common.exceptions.infra_error import InfraError


class CatalogFetchError(InfraError):
    """Raised when the catalog backend cannot answer a query.

    ``retryable`` marks transient failures (network, 5xx, throttling) that the
    retry policy may attempt again within the same cycle.
    """

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, context={"retryable": retryable, "status_code": status_code})
        self.retryable = retryable
        self.status_code = status_code

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.args[0]}{code}"
