"""
Component Test Layer Configuration

Real stores and engine, with the remote endpoint and (where needed) the
key-value storage replaced by mocks.

Usage:
    pytest tests/component -v
"""
import os
import sys

import pytest

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from inventory_flow.local_store import LocalStore

from tests.component.mocks import (
    MemoryKeyValueStore,
    MockHttpClient,
    MockRemoteStore,
)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "component: marks tests as component tests"
    )


# =============================================================================
# Storage Mocks
# =============================================================================

@pytest.fixture
def memory_kv() -> MemoryKeyValueStore:
    """In-memory key-value store"""
    return MemoryKeyValueStore()


@pytest.fixture
def local_store(memory_kv) -> LocalStore:
    """Local store over the in-memory key-value store"""
    return LocalStore(memory_kv)


@pytest.fixture
def file_local_store(tmp_path) -> LocalStore:
    """Local store over a real directory"""
    return LocalStore.from_directory(tmp_path / "storage")


@pytest.fixture
def mock_remote() -> MockRemoteStore:
    """Scriptable remote store (empty remote answers 404)"""
    return MockRemoteStore()


@pytest.fixture
def mock_http_client() -> MockHttpClient:
    """Mock httpx.AsyncClient"""
    return MockHttpClient()
