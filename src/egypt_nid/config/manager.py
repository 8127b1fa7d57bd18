"""Configuration manager for loading and managing configuration.

This module provides the main configuration loading and management functionality,
including support for JSON configuration files, environment variable overrides,
and configuration validation.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from egypt_nid.config.defaults import DEFAULT_CONFIG, DEFAULT_CONFIG_PATH
from egypt_nid.config.schema import Config, LoggingConfig, ValidationConfig
from egypt_nid.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable prefix for all configuration overrides
ENV_PREFIX = "EGYPT_NID_"


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file and environment variables.

    Configuration is loaded with the following precedence (highest to lowest):
    1. CLI arguments (handled by caller)
    2. Environment variables (EGYPT_NID_* prefix)
    3. Configuration file (JSON)
    4. Default values

    Args:
        config_path: Path to configuration file. If None, uses ./config/config.json

    Returns:
        Validated Config instance

    Raises:
        ConfigurationError: If configuration is invalid or malformed

    Example:
        >>> config = load_config(Path("custom/config.json"))
        >>> config.validation.validate_checksum
        False
    """
    # Load .env file if present in project root
    load_dotenv()

    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_PATH)

    config_dict = _load_config_file(config_path)
    config_dict = _apply_env_overrides(config_dict)

    try:
        return Config(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(
            f"Configuration validation failed:\n{e}\n\n"
            f"Fix: Check your configuration file at {config_path} and ensure all "
            f"values match the expected format."
        ) from e


def _load_config_file(config_path: Path) -> dict[str, Any]:
    """Load configuration file or return defaults.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If JSON is malformed or the file cannot be read
    """
    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config_dict = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in config file: {config_path}\n"
                f"Error: {e}\n"
                f"Fix: Check JSON syntax at line {e.lineno}, column {e.colno}"
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read config file: {config_path}\n"
                f"Error: {e}\n"
                f"Fix: Check file permissions and path"
            ) from e

        if not isinstance(config_dict, dict):
            raise ConfigurationError(
                f"Config file must contain a JSON object: {config_path}\n"
                f"Fix: Wrap settings in {{\"validation\": {{...}}, \"logging\": {{...}}}}"
            )
        logger.info(f"Loaded configuration from {config_path}")
        return config_dict

    logger.info(
        f"Config file not found: {config_path}. Using default configuration."
    )
    # Return a deep copy of defaults to avoid mutation
    return json.loads(json.dumps(DEFAULT_CONFIG))


def _apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides with EGYPT_NID_ prefix.

    Recognised variables: EGYPT_NID_VALIDATE_CHECKSUM, EGYPT_NID_ID_COLUMN,
    EGYPT_NID_WARN_ON_LIKELY_EXPIRED, EGYPT_NID_LOG_LEVEL, EGYPT_NID_LOG_FILE,
    EGYPT_NID_REDACT_PII.

    Args:
        config_dict: Configuration dictionary to update

    Returns:
        Updated configuration dictionary with environment overrides applied
    """
    # Validation section
    if validate_checksum := os.getenv(f"{ENV_PREFIX}VALIDATE_CHECKSUM"):
        config_dict.setdefault("validation", {})["validate_checksum"] = _parse_bool(
            validate_checksum
        )
        logger.debug("Override: validate_checksum from environment")

    if id_column := os.getenv(f"{ENV_PREFIX}ID_COLUMN"):
        config_dict.setdefault("validation", {})["id_column"] = id_column
        logger.debug("Override: id_column from environment")

    if warn_expired := os.getenv(f"{ENV_PREFIX}WARN_ON_LIKELY_EXPIRED"):
        config_dict.setdefault("validation", {})["warn_on_likely_expired"] = _parse_bool(
            warn_expired
        )
        logger.debug("Override: warn_on_likely_expired from environment")

    # Logging section
    if log_level := os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
        config_dict.setdefault("logging", {})["level"] = log_level
        logger.debug("Override: log_level from environment")

    if log_file := os.getenv(f"{ENV_PREFIX}LOG_FILE"):
        config_dict.setdefault("logging", {})["log_file"] = log_file
        logger.debug("Override: log_file from environment")

    if redact_pii := os.getenv(f"{ENV_PREFIX}REDACT_PII"):
        config_dict.setdefault("logging", {})["redact_pii"] = _parse_bool(redact_pii)
        logger.debug("Override: redact_pii from environment")

    return config_dict


def _parse_bool(value: str) -> bool:
    """Parse boolean value from string.

    Args:
        value: String value to parse (case-insensitive)

    Returns:
        Boolean value
    """
    return value.lower() in ("true", "1", "yes", "on")


def get_validation_config(config: Config) -> ValidationConfig:
    """Get national ID validation configuration.

    Args:
        config: Configuration instance

    Returns:
        ValidationConfig instance

    Example:
        >>> config = load_config()
        >>> get_validation_config(config).id_column
        'national_id'
    """
    return config.validation


def get_logging_config(config: Config) -> LoggingConfig:
    """Get logging configuration.

    Args:
        config: Configuration instance

    Returns:
        LoggingConfig instance
    """
    return config.logging
