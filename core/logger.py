"""
Service Logger Setup

Configures a named logger for a service from LoggingConfig.

Usage:
    from core.logger import setup_service_logger
    logger = setup_service_logger("vault_service")
"""

import logging
from typing import Optional

from core.config.logging_config import LoggingConfig


def setup_service_logger(
    service_name: str,
    config: Optional[LoggingConfig] = None,
) -> logging.Logger:
    """
    Create (or return) the logger for a service

    Attaches a console handler (unless LOG_CONSOLE=false) and, when LOG_FILE
    is set, a file handler.
    Calling it twice for the same service does not duplicate handlers.

    Args:
        service_name: Logger name, also used as the service identity
        config: Logging configuration (loaded from environment if not provided)

    Returns:
        Configured logger
    """
    config = config or LoggingConfig.from_env()
    logger = logging.getLogger(service_name)
    logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))

    if getattr(logger, "_vault_configured", False):
        return logger

    formatter = logging.Formatter(config.log_format)

    if config.enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Module loggers under "microservices" and "core" share the service handlers
    for package in ("microservices", "core"):
        package_logger = logging.getLogger(package)
        package_logger.setLevel(logger.level)
        for handler in logger.handlers:
            package_logger.addHandler(handler)

    logger._vault_configured = True
    return logger
