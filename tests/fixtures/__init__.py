"""
Shared Test Fixtures

Centralized factories and generators used across all test layers.

Structure:
    - common.py: Base ID generators, timestamps
    - generators.py: Random data generators
    - inventory_fixtures.py: Products, variants, entries, wire records
"""

# Common utilities
from .common import (
    REMOTE_ENDPOINT,
    make_product_id,
    make_variant_id,
    make_entry_id,
    make_timestamp,
)

# Random generators
from .generators import (
    random_string,
    random_color,
    random_statuses,
)

# Inventory fixtures
from .inventory_fixtures import (
    make_entry,
    make_variant,
    make_product,
    make_inventory,
    make_product_record,
)

__all__ = [
    # Common
    "REMOTE_ENDPOINT",
    "make_product_id",
    "make_variant_id",
    "make_entry_id",
    "make_timestamp",
    # Generators
    "random_string",
    "random_color",
    "random_statuses",
    # Inventory
    "make_entry",
    "make_variant",
    "make_product",
    "make_inventory",
    "make_product_record",
]
