"""
Structured logging configuration for sqlmask

Usage:
    import logging

    from sqlmask.utils.logging import setup_logging

    # Setup logging (call once at application startup)
    setup_logging(level="INFO", json_format=True)

    logger = logging.getLogger(__name__)
    logger.info("Registered functions", extra={"prefix": "pii_"})
"""

from .config import configure_from_env, setup_logging, shutdown_logging
from .formatters import ConsoleFormatter, JSONFormatter
from .handlers import ContextLogger

__all__ = [
    "setup_logging",
    "shutdown_logging",
    "configure_from_env",
    "JSONFormatter",
    "ConsoleFormatter",
    "ContextLogger",
]
