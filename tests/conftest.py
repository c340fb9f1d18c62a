"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - component/  : Component tests (real engine, mocked remote / storage)
    - unit/       : Unit tests (pure functions, no I/O)
"""
import os
import sys

import pytest

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

# Import shared fixtures from tests/fixtures
from tests.fixtures import make_inventory


# =============================================================================
# Shared Fixtures
# =============================================================================

@pytest.fixture
def sample_inventory():
    """Populated snapshot: two products with two variants each"""
    return make_inventory(product_count=2, variants_per_product=2)
