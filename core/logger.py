"""
Logging setup

统一的日志初始化：控制台输出 + 可选文件输出
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from core.config import LoggingConfig, get_settings


def setup_service_logger(
    service_name: Optional[str] = None,
    level: Optional[str] = None,
    config: Optional[LoggingConfig] = None
) -> logging.Logger:
    """
    Configure the root logger for a process and return a named logger

    Args:
        service_name: Logger name, defaults to LoggingConfig.service_name
        level: Overrides the configured log level (e.g. "DEBUG")
        config: Logging configuration, defaults to the global settings

    Returns:
        Logger for service_name
    """
    config = config or get_settings().logging
    service_name = service_name or config.service_name
    log_level = getattr(logging, (level or config.log_level).upper(), logging.INFO)
    formatter = logging.Formatter(config.log_format)

    root = logging.getLogger()
    root.setLevel(log_level)

    # Re-running setup must not stack duplicate handlers
    for handler in list(root.handlers):
        if getattr(handler, "_inventory_flow_handler", False):
            root.removeHandler(handler)
            handler.close()

    if config.enable_console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(formatter)
        console._inventory_flow_handler = True
        root.addHandler(console)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        file_handler._inventory_flow_handler = True
        root.addHandler(file_handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logger = logging.getLogger(service_name)
    logger.debug(f"Logging initialized for {service_name} ({config.environment}, level={logging.getLevelName(log_level)})")
    return logger


__all__ = ["setup_service_logger"]
