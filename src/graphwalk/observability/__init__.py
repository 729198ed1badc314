"""Observability module for graphwalk.

Provides structured logging on top of structlog and rich.
"""

from graphwalk.observability.logging import (
    close_file_logging,
    configure_logging,
    get_log_file,
    get_logger,
    reset_logging,
)

__all__ = [
    "close_file_logging",
    "configure_logging",
    "get_log_file",
    "get_logger",
    "reset_logging",
]
