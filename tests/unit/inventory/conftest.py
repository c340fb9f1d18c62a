"""
Unit Test Fixtures for Inventory Models and Commands
"""
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))


@pytest.fixture
def frozen_clock(monkeypatch):
    """Deterministic updatedAt values"""
    ticks = iter(f"2025-01-01T00:00:{i:02d}.000Z" for i in range(60))
    monkeypatch.setattr("inventory_flow.models.utc_timestamp", lambda: next(ticks))
