"""
Logging configuration for column coverage

Provides human-readable or JSON-formatted logging and a logger wrapper
carrying contextual fields (coverage type, table unique_id...).

Usage:
    from column_coverage.utils.logging import setup_logging, ContextLogger

    # Setup logging (call once at application startup)
    setup_logging(level="INFO", json_format=False)

    # Logger with context, passed down to the coverage core
    log = ContextLogger(__name__, cov_type="doc")
    log.info("Computing coverage", tables=12)
"""

from .config import configure_from_env, get_logger, setup_logging, shutdown_logging
from .formatters import ConsoleFormatter, JSONFormatter
from .handlers import ContextLogger

__all__ = [
    "setup_logging",
    "get_logger",
    "configure_from_env",
    "shutdown_logging",
    "JSONFormatter",
    "ConsoleFormatter",
    "ContextLogger",
]
