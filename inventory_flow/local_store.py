"""
Local Store

On-device snapshot persistence. This is the durability floor: every save
reaches it before the remote store is tried, and it never raises.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from core.config import DEFAULT_STORAGE_KEY
from .models import InventoryData
from .protocols import KeyValueStoreProtocol, StorageFailureError

logger = logging.getLogger(__name__)


class FileKeyValueStore:
    """
    Key-value store mapping each key to <directory>/<key>.json.

    Writes go to a temp file in the same directory and are swapped in with
    os.replace, so readers see either the old or the new value.
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageFailureError(f"Failed to read {path}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp_name = None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageFailureError(f"Failed to write {path}: {e}") from e

    def remove_item(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            raise StorageFailureError(f"Failed to remove {path}: {e}") from e


class LocalStore:
    """Snapshot persistence under one fixed, versioned key"""

    def __init__(
        self,
        kv_store: KeyValueStoreProtocol,
        storage_key: str = DEFAULT_STORAGE_KEY
    ):
        self.kv_store = kv_store
        self.storage_key = storage_key

    @classmethod
    def from_directory(cls, directory: Union[str, Path], storage_key: str = DEFAULT_STORAGE_KEY) -> "LocalStore":
        return cls(FileKeyValueStore(directory), storage_key=storage_key)

    def load(self) -> Optional[InventoryData]:
        """
        Read the persisted snapshot

        Returns:
            InventoryData, or None when nothing is stored or the record is
            unreadable or corrupt
        """
        try:
            raw = self.kv_store.get_item(self.storage_key)
        except Exception as e:
            logger.error(f"Failed to load local inventory: {e}")
            return None

        if raw is None:
            logger.debug(f"No local inventory under '{self.storage_key}'")
            return None

        try:
            return InventoryData.from_json(raw)
        except ValidationError as e:
            logger.error(f"Corrupt local inventory under '{self.storage_key}': {e.error_count()} validation errors")
            return None

    def save(self, data: InventoryData) -> bool:
        """
        Persist the snapshot

        Returns:
            True when the record was written
        """
        try:
            self.kv_store.set_item(self.storage_key, data.to_json())
        except Exception as e:
            logger.error(f"Failed to save to local storage: {e}")
            return False

        logger.debug(f"Saved {len(data.products)} products to local storage")
        return True

    def clear(self) -> bool:
        """Remove the persisted snapshot"""
        try:
            self.kv_store.remove_item(self.storage_key)
        except Exception as e:
            logger.error(f"Failed to clear local storage: {e}")
            return False
        return True


__all__ = ["FileKeyValueStore", "LocalStore"]
