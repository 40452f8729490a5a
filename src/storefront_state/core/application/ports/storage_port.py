from abc import ABC, abstractmethod


class StoragePort(ABC):
    """String key-value storage backing the persisted collections.

    Implementations MUST raise ``StorageError`` on I/O failures. A missing key
    is not a failure: ``get_item`` returns None.
    """

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        pass
