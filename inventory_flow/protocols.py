"""
Inventory Flow Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import Optional, Protocol, runtime_checkable

from .models import InventoryData


# ==================== Sync Errors ====================


class InventorySyncError(Exception):
    """Base error for persistence and sync failures"""
    pass


class StorageFailureError(InventorySyncError):
    """Local key-value store read or write failed"""
    pass


class RemoteNetworkError(InventorySyncError):
    """Remote store unreachable, timed out or answered non-2xx"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class RemoteParseError(InventorySyncError):
    """Remote store returned a payload that is not a product list"""
    pass


class SyncEngineClosedError(InventorySyncError):
    """Sync engine used after stop()"""
    pass


# ==================== Lookup Errors ====================


class InventoryNotFoundError(LookupError):
    """Referenced inventory entity does not exist"""
    pass


class ProductNotFoundError(InventoryNotFoundError):
    """Product not found error"""
    pass


class VariantNotFoundError(InventoryNotFoundError):
    """Color variant not found error"""
    pass


class EntryNotFoundError(InventoryNotFoundError):
    """Entry not found error"""
    pass


# ==================== Storage Interfaces ====================


@runtime_checkable
class KeyValueStoreProtocol(Protocol):
    """
    Synchronous string key-value storage on the host.

    Implementations raise StorageFailureError on I/O problems.
    """

    def get_item(self, key: str) -> Optional[str]:
        """Stored value or None when absent"""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store value under key"""
        ...

    def remove_item(self, key: str) -> None:
        """Delete key if present"""
        ...


@runtime_checkable
class LocalStoreProtocol(Protocol):
    """Durable snapshot storage; never raises"""

    def load(self) -> Optional[InventoryData]:
        """Persisted snapshot, or None when absent or unreadable"""
        ...

    def save(self, data: InventoryData) -> bool:
        """Persist snapshot; False on failure"""
        ...


@runtime_checkable
class RemoteStoreProtocol(Protocol):
    """Best-effort remote mirror of the snapshot"""

    async def read_remote(self) -> InventoryData:
        """Fetch snapshot; raises RemoteNetworkError or RemoteParseError"""
        ...

    async def write_remote(self, data: InventoryData) -> bool:
        """Push snapshot; False on failure"""
        ...

    async def close(self) -> None:
        """Release connections"""
        ...
