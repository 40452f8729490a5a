import os
import re
import tempfile
from pathlib import Path

from storefront_state.core.application.ports.common.exceptions import StorageError
from storefront_state.core.application.ports.storage_port import StoragePort
from storefront_state.infrastructure.observability import get_logger

logger = get_logger("storage")

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")


class JsonFileStorageAdapter(StoragePort):
    """One ``<key>.json`` file per storage key under ``storage_dir``."""

    def __init__(self, storage_dir: Path):
        self.storage_dir = Path(storage_dir)

    def path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.storage_dir / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            with open(path, encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read storage key '{key}': {e}", key=key) from e

    def set_item(self, key: str, value: str) -> None:
        """
        Atomic write: write to temp file then rename.
        """
        path = self.path_for(key)
        tmp_path = None
        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
            # Temp file in the same directory so os.replace stays on one filesystem
            with tempfile.NamedTemporaryFile("w", dir=self.storage_dir, delete=False, encoding="utf-8") as tmp:
                tmp.write(value)
                tmp_path = tmp.name

            os.replace(tmp_path, path)

        except OSError as e:
            logger.error("Failed to write storage key", key=key, error_details=str(e))
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageError(f"Failed to write storage key '{key}': {e}", key=key) from e

    def remove_item(self, key: str) -> None:
        try:
            self.path_for(key).unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to remove storage key '{key}': {e}", key=key) from e
