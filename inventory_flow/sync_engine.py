"""
Sync Engine

Local-first orchestration of the inventory snapshot:

- start(): remote-first load with local fallback; never fails
- replace(): whole-snapshot replacement, debounced into save cycles
- save cycle: local store always, then remote store best-effort

States: loading -> idle -> syncing -> idle | error. The error state is
advisory and cleared by the next successful cycle.
"""

import asyncio
import logging
from typing import Callable, List, Optional

from .models import (
    InventoryData,
    LocalOnly,
    StorageMode,
    SyncStatus,
    SyncView,
)
from .protocols import (
    LocalStoreProtocol,
    RemoteStoreProtocol,
    SyncEngineClosedError,
)

logger = logging.getLogger(__name__)

SyncListener = Callable[[SyncView], None]


class SyncEngine:
    """Debounced local-first persistence of the inventory snapshot"""

    def __init__(
        self,
        local_store: LocalStoreProtocol,
        mode: Optional[StorageMode] = None,
        remote_store: Optional[RemoteStoreProtocol] = None,
        debounce_seconds: float = 1.0,
        remote_timeout: Optional[float] = 10.0
    ):
        """
        Initialize Sync Engine

        Args:
            local_store: Durable on-device store
            mode: LocalOnly or LocalAndRemote(endpoint), fixed for the engine's lifetime
            remote_store: Remote adapter; required exactly when mode is LocalAndRemote
            debounce_seconds: Quiescence window before a save cycle fires
            remote_timeout: Upper bound for each remote call, None for no bound
        """
        mode = mode or LocalOnly()
        if mode.remote_enabled and remote_store is None:
            raise ValueError("LocalAndRemote mode requires a remote_store")
        if not mode.remote_enabled and remote_store is not None:
            raise ValueError("LocalOnly mode does not take a remote_store")
        if debounce_seconds < 0:
            raise ValueError("debounce_seconds must be >= 0")

        self.local_store = local_store
        self.mode = mode
        self.remote_store = remote_store
        self.debounce_seconds = debounce_seconds
        self.remote_timeout = remote_timeout

        self._snapshot = InventoryData.empty()
        self._status = SyncStatus.LOADING
        self._loaded = False
        self._closed = False
        self._storage_error = False

        # Engine-owned debounce timer and the single in-flight save task
        self._timer: Optional[asyncio.TimerHandle] = None
        self._save_task: Optional[asyncio.Task] = None
        self._rerun = False
        self._dirty = False

        self._listeners: List[SyncListener] = []
        self.save_cycles = 0
        # "remote", "local" or "empty" once started
        self.loaded_from: Optional[str] = None

    # ====================
    # State
    # ====================

    @property
    def snapshot(self) -> InventoryData:
        return self._snapshot

    @property
    def status(self) -> SyncStatus:
        return self._status

    @property
    def is_loading(self) -> bool:
        return not self._loaded

    @property
    def remote_enabled(self) -> bool:
        return self.mode.remote_enabled

    @property
    def has_pending_save(self) -> bool:
        """A save is scheduled or running"""
        return self._timer is not None or self._is_saving()

    def view(self) -> SyncView:
        return SyncView(
            snapshot=self._snapshot,
            is_loading=self.is_loading,
            sync_status=self._status,
            storage_error=self._storage_error,
            remote_enabled=self.remote_enabled,
        )

    def add_listener(self, listener: SyncListener) -> Callable[[], None]:
        """
        Subscribe to view changes

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def remove():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    # ====================
    # Lifecycle
    # ====================

    async def start(self) -> InventoryData:
        """
        Load the initial snapshot

        Remote first when configured (mirrored into the local store on
        success), otherwise or on any remote failure the local store, and
        an empty inventory when that is absent or corrupt.
        """
        if self._closed:
            raise SyncEngineClosedError("SyncEngine has been stopped")
        if self._loaded:
            return self._snapshot

        self._set_status(SyncStatus.LOADING)
        data: Optional[InventoryData] = None

        if self.remote_store is not None:
            try:
                data = await asyncio.wait_for(self.remote_store.read_remote(), timeout=self.remote_timeout)
            except asyncio.TimeoutError:
                logger.warning(f"Remote load timed out after {self.remote_timeout}s, falling back to local storage")
            except Exception as e:
                logger.warning(f"Failed to load from remote store, falling back to local storage: {e}")
            else:
                self.loaded_from = "remote"
                self._storage_error = not self.local_store.save(data)

        if data is None:
            data = self.local_store.load()
            self.loaded_from = "local"
            if data is None:
                logger.info("No stored inventory found, starting empty")
                data = InventoryData.empty()
                self.loaded_from = "empty"

        self._snapshot = data
        self._loaded = True
        self._status = SyncStatus.IDLE
        logger.info(
            f"SyncEngine started with {len(data.products)} products "
            f"({'local+remote' if self.remote_enabled else 'local only'})"
        )
        self._notify()
        return data

    async def stop(self, flush: bool = False) -> None:
        """
        Tear down: cancel the pending save, wait for the in-flight cycle,
        release the remote client

        Args:
            flush: Persist unsaved changes before stopping
        """
        if self._closed:
            return

        if flush and self._loaded:
            await self.flush()

        self._cancel_timer()
        self._closed = True

        if self._is_saving():
            await self._save_task

        if self.remote_store is not None:
            await self.remote_store.close()

        logger.info("SyncEngine stopped")

    async def __aenter__(self):
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.stop()

    # ====================
    # Mutation & Save
    # ====================

    def replace(self, snapshot: InventoryData) -> None:
        """
        Replace the whole in-memory snapshot and (re)schedule a save

        Must be called from the engine's event loop.
        """
        if self._closed:
            raise SyncEngineClosedError("SyncEngine has been stopped")
        if not isinstance(snapshot, InventoryData):
            raise TypeError(f"Expected InventoryData, got {type(snapshot).__name__}")
        if not self._loaded:
            logger.warning("Ignoring snapshot replacement before the initial load completed")
            return

        self._snapshot = snapshot
        self._dirty = True
        self._schedule_save()
        self._notify()

    async def flush(self) -> bool:
        """
        Run a save cycle now if there are unsaved changes and wait for it

        Returns:
            True when the last cycle reached every configured store
        """
        if self._closed:
            raise SyncEngineClosedError("SyncEngine has been stopped")
        if not self._loaded:
            return False

        self._cancel_timer()
        if self._dirty:
            self._start_save()
        if self._is_saving():
            await self._save_task

        return not self._storage_error and self._status != SyncStatus.ERROR

    def _schedule_save(self) -> None:
        self._cancel_timer()
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self.debounce_seconds, self._on_debounce_elapsed)
        logger.debug(f"Save scheduled in {self.debounce_seconds}s")

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _on_debounce_elapsed(self) -> None:
        self._timer = None
        if self._closed:
            return
        self._start_save()

    def _start_save(self) -> None:
        # One cycle in flight; later requests collapse into one rerun
        if self._is_saving():
            self._rerun = True
            return
        self._save_task = asyncio.get_running_loop().create_task(self._run_save_cycles())

    def _is_saving(self) -> bool:
        return self._save_task is not None and not self._save_task.done()

    async def _run_save_cycles(self) -> None:
        while True:
            self._rerun = False
            await self._save_cycle()
            if not self._rerun or self._closed:
                break

    async def _save_cycle(self) -> None:
        snapshot = self._snapshot
        self._dirty = False
        self.save_cycles += 1
        self._set_status(SyncStatus.SYNCING)

        if self.local_store.save(snapshot):
            self._storage_error = False
        else:
            # Still held in memory; flush() or the next edit retries
            self._storage_error = True
            self._dirty = True
            logger.warning("Local save failed, inventory kept in memory only")

        if self.remote_store is None:
            self._set_status(SyncStatus.IDLE)
            return

        try:
            success = await asyncio.wait_for(self.remote_store.write_remote(snapshot), timeout=self.remote_timeout)
        except asyncio.TimeoutError:
            logger.error(f"Remote save timed out after {self.remote_timeout}s")
            success = False
        except Exception as e:
            logger.error(f"Remote save failed: {e}")
            success = False

        self._set_status(SyncStatus.IDLE if success else SyncStatus.ERROR)

    # ====================
    # Notification
    # ====================

    def _set_status(self, status: SyncStatus) -> None:
        if status == self._status:
            return
        logger.debug(f"Sync status {self._status.value} -> {status.value}")
        self._status = status
        self._notify()

    def _notify(self) -> None:
        if not self._listeners:
            return
        view = self.view()
        for listener in list(self._listeners):
            try:
                listener(view)
            except Exception as e:
                logger.error(f"Sync listener {listener!r} failed: {e}")


__all__ = ["SyncEngine", "SyncListener"]
