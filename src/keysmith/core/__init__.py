"""Core KeySmith utilities.

This module exports core utilities for use throughout the application.
"""

from keysmith.core.config import Settings, get_settings
from keysmith.core.logging import (
    LoggingContext,
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
    new_correlation_id,
    request_context,
)

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "LoggingContext",
    "bind_correlation_id",
    "clear_context",
    "new_correlation_id",
    "request_context",
]
