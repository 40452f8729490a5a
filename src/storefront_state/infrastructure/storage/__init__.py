from storefront_state.infrastructure.storage.in_memory_storage_adapter import InMemoryStorageAdapter
from storefront_state.infrastructure.storage.json_file_storage_adapter import JsonFileStorageAdapter

__all__ = ["InMemoryStorageAdapter", "JsonFileStorageAdapter"]
