"""
Inventory Flow Data Models

Products are made of color variants; each variant holds stock slots
(entries) that cycle empty -> stocked -> sold -> empty.
"""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, Any, Dict, List, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter


DEFAULT_VARIANT_ENTRIES = 5


def generate_id() -> str:
    """Opaque client-side identifier"""
    return uuid.uuid4().hex[:12]


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and Z suffix"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _coerce_id(value: Any) -> Any:
    # Sheet backends turn all-digit ids into numbers
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


EntityId = Annotated[str, BeforeValidator(_coerce_id)]


# ====================
# Entity Model
# ====================


class EntryStatus(str, Enum):
    """Stock slot status"""
    EMPTY = "empty"
    STOCKED = "stocked"
    SOLD = "sold"

    def next(self) -> "EntryStatus":
        return next_status(self)


_NEXT_STATUS = {
    EntryStatus.EMPTY: EntryStatus.STOCKED,
    EntryStatus.STOCKED: EntryStatus.SOLD,
    EntryStatus.SOLD: EntryStatus.EMPTY,
}


def next_status(status: Union[EntryStatus, str]) -> EntryStatus:
    """Advance a slot one step through empty -> stocked -> sold -> empty"""
    return _NEXT_STATUS[EntryStatus(status)]


class Entry(BaseModel):
    """One countable stock unit"""
    id: EntityId = Field(default_factory=generate_id)
    status: EntryStatus = EntryStatus.EMPTY


class ColorVariant(BaseModel):
    """A color of a product and its stock slots"""
    id: EntityId = Field(default_factory=generate_id)
    name: str = Field(..., min_length=1)
    entries: List[Entry] = Field(default_factory=list)

    @classmethod
    def create(cls, name: str, entry_count: int = DEFAULT_VARIANT_ENTRIES) -> "ColorVariant":
        """New variant with a batch of empty slots"""
        if entry_count < 0:
            raise ValueError("entry_count must be >= 0")
        return cls(name=name, entries=[Entry() for _ in range(entry_count)])

    def count(self, status: EntryStatus) -> int:
        return sum(1 for entry in self.entries if entry.status == status)


class Product(BaseModel):
    """Root aggregate; owns its variants"""
    model_config = ConfigDict(populate_by_name=True)

    id: EntityId = Field(default_factory=generate_id)
    name: str = Field(..., min_length=1)
    category: Optional[str] = None
    variants: List[ColorVariant] = Field(default_factory=list)
    updated_at: str = Field(default_factory=utc_timestamp, alias="updatedAt")

    def touch(self) -> "Product":
        """Copy with updatedAt refreshed"""
        return self.model_copy(update={"updated_at": utc_timestamp()})


_PRODUCT_LIST = TypeAdapter(List[Product])


class InventoryData(BaseModel):
    """Full inventory snapshot; the unit of persistence and remote transfer"""
    products: List[Product] = Field(default_factory=list)

    @classmethod
    def empty(cls) -> "InventoryData":
        return cls(products=[])

    def to_records(self) -> List[Dict[str, Any]]:
        """Wire form: JSON-ready list of product records"""
        return _PRODUCT_LIST.dump_python(
            self.products, mode="json", by_alias=True, exclude_none=True
        )

    def to_json(self) -> str:
        return _PRODUCT_LIST.dump_json(
            self.products, by_alias=True, exclude_none=True
        ).decode("utf-8")

    @classmethod
    def from_records(cls, records: Any) -> "InventoryData":
        """Validate a list of product records; raises pydantic.ValidationError"""
        return cls(products=_PRODUCT_LIST.validate_python(records))

    @classmethod
    def from_json(cls, raw: Union[str, bytes]) -> "InventoryData":
        """Parse a JSON array of product records; raises pydantic.ValidationError"""
        return cls(products=_PRODUCT_LIST.validate_json(raw))


# ====================
# Sync State
# ====================


class SyncStatus(str, Enum):
    """Sync engine state"""
    LOADING = "loading"
    IDLE = "idle"
    SYNCING = "syncing"
    ERROR = "error"


class SyncView(BaseModel):
    """What the presentation layer renders"""
    model_config = ConfigDict(frozen=True)

    snapshot: InventoryData
    is_loading: bool
    sync_status: SyncStatus
    storage_error: bool = False
    remote_enabled: bool = False


# ====================
# Storage Mode
# ====================


class LocalOnly(BaseModel):
    """No remote store configured"""
    model_config = ConfigDict(frozen=True)

    @property
    def remote_enabled(self) -> bool:
        return False


class LocalAndRemote(BaseModel):
    """Local store mirrored to a remote endpoint"""
    model_config = ConfigDict(frozen=True)

    endpoint: str = Field(..., min_length=1)

    @property
    def remote_enabled(self) -> bool:
        return True


StorageMode = Union[LocalOnly, LocalAndRemote]


def storage_mode_from_url(url: Optional[str]) -> StorageMode:
    """Blank or missing URL means local-only"""
    if url and url.strip():
        return LocalAndRemote(endpoint=url.strip())
    return LocalOnly()
