"""
Inventory Flow Factory

Factory functions for creating engine instances with real dependencies.
This is the ONLY place that wires the HTTP and file-system stores.

Usage:
    from inventory_flow.factory import create_sync_engine
    engine = create_sync_engine()
    await engine.start()
"""
from typing import Optional

from core.config import AppConfig, ModelConfig, SyncConfig, get_settings

from .insights import InsightClient
from .local_store import LocalStore
from .models import storage_mode_from_url
from .sync_engine import SyncEngine


def create_local_store(config: Optional[SyncConfig] = None) -> LocalStore:
    config = config or get_settings().sync
    return LocalStore.from_directory(config.storage_dir, storage_key=config.storage_key)


def create_sync_engine(config: Optional[SyncConfig] = None) -> SyncEngine:
    """
    Create SyncEngine with real dependencies.

    The storage mode is decided once here: a configured remote URL gives
    LocalAndRemote, anything else LocalOnly.

    Args:
        config: Sync configuration, defaults to the global settings

    Returns:
        SyncEngine (not started)
    """
    config = config or get_settings().sync
    mode = storage_mode_from_url(config.remote_url)

    remote_store = None
    if mode.remote_enabled:
        # Import real HTTP adapter here (not at module level)
        from .remote_store import RemoteStoreClient
        remote_store = RemoteStoreClient(mode.endpoint)

    return SyncEngine(
        local_store=create_local_store(config),
        mode=mode,
        remote_store=remote_store,
        debounce_seconds=config.debounce_seconds,
        remote_timeout=config.remote_timeout,
    )


def create_insight_client(config: Optional[ModelConfig] = None) -> InsightClient:
    return InsightClient(config or get_settings().model)


def create_from_settings(settings: Optional[AppConfig] = None):
    """Engine and insight client from one AppConfig"""
    settings = settings or get_settings()
    return create_sync_engine(settings.sync), create_insight_client(settings.model)
