from typing import Any


class DomainError(Exception):
    """
    Base class for all domain layer exceptions.
    ``context`` carries structured fields for the log line that reports it.
    """

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}
