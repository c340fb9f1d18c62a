"""
InventoryFlow local-first persistence and sync

Products -> color variants -> stock entries, persisted as whole snapshots
to a local store and mirrored best-effort to an optional remote endpoint.
"""

from .models import (
    ColorVariant,
    Entry,
    EntryStatus,
    InventoryData,
    LocalAndRemote,
    LocalOnly,
    Product,
    StorageMode,
    SyncStatus,
    SyncView,
    next_status,
    storage_mode_from_url,
)
from .protocols import (
    EntryNotFoundError,
    InventorySyncError,
    ProductNotFoundError,
    RemoteNetworkError,
    RemoteParseError,
    StorageFailureError,
    SyncEngineClosedError,
    VariantNotFoundError,
)
from .local_store import FileKeyValueStore, LocalStore
from .sync_engine import SyncEngine

__all__ = [
    "ColorVariant",
    "Entry",
    "EntryStatus",
    "InventoryData",
    "LocalAndRemote",
    "LocalOnly",
    "Product",
    "StorageMode",
    "SyncStatus",
    "SyncView",
    "next_status",
    "storage_mode_from_url",
    "EntryNotFoundError",
    "InventorySyncError",
    "ProductNotFoundError",
    "RemoteNetworkError",
    "RemoteParseError",
    "StorageFailureError",
    "SyncEngineClosedError",
    "VariantNotFoundError",
    "FileKeyValueStore",
    "LocalStore",
    "SyncEngine",
]

__version__ = "0.1.0"
