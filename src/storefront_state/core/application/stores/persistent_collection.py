from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

import structlog
from pydantic import TypeAdapter, ValidationError

from storefront_state.core.application.ports.common.exceptions import StorageError
from storefront_state.core.application.ports.storage_port import StoragePort

logger = structlog.get_logger()

T = TypeVar("T")


class PersistentCollection(Generic[T]):
    """A list of entries persisted as one JSON array under a single storage key.

    Loaded once on construction. Absent, malformed or schema-invalid values
    load as an empty list; storage failures are logged and never raised.
    With ``write_through`` every ``replace`` re-serializes the whole list,
    otherwise changes stay dirty until ``flush``.
    """

    def __init__(
        self,
        storage: StoragePort,
        key: str,
        item_type: type[T],
        write_through: bool = True,
    ) -> None:
        self._storage = storage
        self.key = key
        self._adapter: TypeAdapter[list[T]] = TypeAdapter(list[item_type])  # type: ignore[valid-type]
        self._write_through = write_through
        self._dirty = False
        self._items: list[T] = self.load()

    @property
    def items(self) -> list[T]:
        return list(self._items)

    @property
    def dirty(self) -> bool:
        return self._dirty

    def load(self) -> list[T]:
        try:
            raw = self._storage.get_item(self.key)
        except StorageError as e:
            logger.warning("Failed to read collection, starting empty", key=self.key, error_details=str(e))
            return []

        if raw is None or not raw.strip():
            return []

        try:
            return self._adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(
                "Discarding unreadable collection, starting empty",
                key=self.key,
                error_count=e.error_count(),
            )
            return []

    def conform(self, normalize: Callable[[list[T]], list[T]]) -> None:
        """Applies a store's invariants to the loaded entries.

        A changed result is logged and replaces the stored value.
        """
        conformed = list(normalize(self.items))
        if conformed == self._items:
            return
        logger.warning(
            "Repaired stored collection",
            key=self.key,
            loaded_count=len(self._items),
            kept_count=len(conformed),
        )
        self.replace(conformed)

    def replace(self, items: list[T]) -> None:
        self._items = list(items)
        if self._write_through:
            self.save_all(self._items)
        else:
            self._dirty = True

    def save_all(self, items: list[T]) -> None:
        payload = self._adapter.dump_json(items).decode("utf-8")
        try:
            self._storage.set_item(self.key, payload)
        except StorageError as e:
            # Kept dirty so a later flush can retry.
            logger.warning("Failed to persist collection", key=self.key, error_details=str(e))
            self._dirty = True
            return
        self._dirty = False

    def flush(self) -> None:
        if self._dirty:
            self.save_all(self._items)

    def clear(self, remove_key: bool = False) -> None:
        if not remove_key:
            self.replace([])
            return

        self._items = []
        self._dirty = False
        try:
            self._storage.remove_item(self.key)
        except StorageError as e:
            logger.warning("Failed to remove collection key", key=self.key, error_details=str(e))
            self._dirty = True


def first_per_key(items: list[T], key: Callable[[T], Hashable]) -> list[T]:
    """Keeps the first entry for each identity, preserving order."""
    seen: set[Hashable] = set()
    kept = []
    for item in items:
        identity = key(item)
        if identity in seen:
            continue
        seen.add(identity)
        kept.append(item)
    return kept
