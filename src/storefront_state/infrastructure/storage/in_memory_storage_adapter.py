from storefront_state.core.application.ports.storage_port import StoragePort


class InMemoryStorageAdapter(StoragePort):
    """Dict-backed storage; contents vanish with the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self.data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove_item(self, key: str) -> None:
        self.data.pop(key, None)
