"""
Component Test Fixtures for the Inventory Sync Engine

Engine factories with a short debounce window, wired to the layer's
storage mocks.
"""
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from inventory_flow.local_store import LocalStore
from inventory_flow.models import LocalAndRemote, LocalOnly
from inventory_flow.sync_engine import SyncEngine

from tests.fixtures import REMOTE_ENDPOINT

DEBOUNCE = 0.05


@pytest.fixture
def make_local_engine(local_store):
    """Build a local-only engine with a short debounce window"""

    def _make(debounce_seconds: float = DEBOUNCE, store: LocalStore = None) -> SyncEngine:
        return SyncEngine(
            local_store=store or local_store,
            mode=LocalOnly(),
            debounce_seconds=debounce_seconds,
        )

    return _make


@pytest.fixture
def make_remote_engine(local_store, mock_remote):
    """Build a local+remote engine with a short debounce window"""

    def _make(
        debounce_seconds: float = DEBOUNCE,
        remote_timeout: float = 1.0,
        remote=None,
        store: LocalStore = None
    ) -> SyncEngine:
        return SyncEngine(
            local_store=store or local_store,
            mode=LocalAndRemote(endpoint=REMOTE_ENDPOINT),
            remote_store=remote or mock_remote,
            debounce_seconds=debounce_seconds,
            remote_timeout=remote_timeout,
        )

    return _make
