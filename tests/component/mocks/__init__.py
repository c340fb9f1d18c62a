"""
Component Test Mocks

Shared mock implementations for component testing.
These mocks replace real I/O dependencies (key-value storage, HTTP).
"""

from .http_mock import MockHttpClient, MockHttpResponse
from .store_mock import FailingKeyValueStore, MemoryKeyValueStore, MockRemoteStore

__all__ = [
    'MockHttpClient',
    'MockHttpResponse',
    'FailingKeyValueStore',
    'MemoryKeyValueStore',
    'MockRemoteStore',
]
