#!/usr/bin/env python3
"""
Core Module for InventoryFlow

Shared infrastructure used by the inventory_flow package.

COMPONENTS:
    - config/: Dataclass configuration loaded from the environment
    - logger.py: Process-wide logging setup
    - service_client_base.py: Base class for outbound httpx clients

USAGE:
    from core.config import get_settings
    from core.logger import setup_service_logger

    settings = get_settings()
    logger = setup_service_logger("inventory_flow")
"""

__version__ = "0.1.0"
