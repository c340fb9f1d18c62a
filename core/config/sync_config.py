#!/usr/bin/env python3
"""Sync engine configuration

Local storage location, the optional remote sheet endpoint and the
timing knobs of the debounced save loop.
"""
import os
from dataclasses import dataclass
from typing import Optional

def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default

def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default

def _at_least(value, minimum, default):
    """Out-of-range values fall back to the default"""
    return value if value >= minimum else default

def _positive(value, default):
    return value if value > 0 else default


DEFAULT_STORAGE_KEY = "inventory_flow_data_v1"


@dataclass
class SyncConfig:
    """Local-first persistence settings"""

    # ===========================================
    # Local Store
    # ===========================================
    storage_dir: str = os.path.join(os.path.expanduser("~"), ".inventory_flow")
    storage_key: str = DEFAULT_STORAGE_KEY

    # ===========================================
    # Remote Store (sheet-backed web app)
    # ===========================================
    # Blank means local-only mode
    remote_url: Optional[str] = None
    remote_timeout: float = 10.0

    # ===========================================
    # Save loop
    # ===========================================
    debounce_ms: int = 1000
    default_variant_entries: int = 5

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000.0

    @classmethod
    def from_env(cls) -> 'SyncConfig':
        """Load sync configuration from environment variables"""
        remote_url = os.getenv("INVENTORY_REMOTE_URL") or os.getenv("GOOGLE_SCRIPT_URL", "")
        return cls(
            storage_dir=os.path.expanduser(
                os.getenv("INVENTORY_STORAGE_DIR", os.path.join("~", ".inventory_flow"))
            ),
            storage_key=os.getenv("INVENTORY_STORAGE_KEY", DEFAULT_STORAGE_KEY),
            remote_url=remote_url.strip() or None,
            remote_timeout=_positive(_float(os.getenv("INVENTORY_REMOTE_TIMEOUT", "10.0"), 10.0), 10.0),
            debounce_ms=_at_least(_int(os.getenv("INVENTORY_DEBOUNCE_MS", "1000"), 1000), 0, 1000),
            default_variant_entries=_at_least(_int(os.getenv("INVENTORY_DEFAULT_ENTRIES", "5"), 5), 0, 5),
        )
