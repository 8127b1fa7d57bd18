"""Config module.

This module provides configuration management functionality.
"""

from egypt_nid.config.manager import (
    get_logging_config,
    get_validation_config,
    load_config,
)
from egypt_nid.config.schema import (
    Config,
    LoggingConfig,
    ValidationConfig,
)

__all__ = [
    # Main configuration loading
    "load_config",
    # Helper functions
    "get_validation_config",
    "get_logging_config",
    # Configuration models
    "Config",
    "ValidationConfig",
    "LoggingConfig",
]
