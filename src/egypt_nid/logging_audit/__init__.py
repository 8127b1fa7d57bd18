"""Logging Audit module.

This module provides logging configuration and national ID redaction.
"""

from .formatters import PIIRedactingFormatter
from .logger import (
    configure_logging,
    configure_logging_from_config,
    get_logger,
    suppress_console_logging,
)

__all__ = [
    "configure_logging",
    "configure_logging_from_config",
    "get_logger",
    "suppress_console_logging",
    "PIIRedactingFormatter",
]
