#!/usr/bin/env python3
"""Application main configuration

Combines the sync, model and logging sub-configs.
"""
import os
from dataclasses import dataclass, field

from .logging_config import LoggingConfig
from .model_config import ModelConfig
from .sync_config import SyncConfig


@dataclass
class AppConfig:
    """InventoryFlow configuration"""
    environment: str = "development"
    debug: bool = False

    sync: SyncConfig = field(default_factory=SyncConfig)
    model: ModelConfig = field(default_factory=ModelConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def log_level(self) -> str:
        return self.logging.log_level

    @classmethod
    def from_env(cls) -> 'AppConfig':
        """Load all configuration from environment variables"""
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        return cls(
            environment=env,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            sync=SyncConfig.from_env(),
            model=ModelConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )
