"""Default configuration values.

This module defines the default configuration values used when no configuration
file is provided or when configuration values are not specified.
"""

from typing import Any

# Default configuration dictionary
# This is used as a fallback when no configuration file is present
DEFAULT_CONFIG: dict[str, Any] = {
    "validation": {
        # Check digit algorithm is unofficial, so it is not enforced by default
        "validate_checksum": False,
        # CSV column holding national IDs for batch validation
        "id_column": "national_id",
        # Flag cards past their estimated expiry as warnings in batch reports
        "warn_on_likely_expired": True,
    },
    "logging": {
        "level": "INFO",
        "log_file": "logs/egypt-nid.log",
        # National IDs are PII; mask them unless the user opts out
        "redact_pii": True,
    },
}

# Default configuration file path
DEFAULT_CONFIG_PATH = "config/config.json"
