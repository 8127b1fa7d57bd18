"""Logging configuration and logger factory for egypt-nid.

This module provides centralized logging configuration with support for:
- Console and file handlers with different log levels
- Log rotation to prevent unbounded file growth
- National ID redaction via custom formatters
- Environment variable configuration

The library modules only create loggers; handlers are installed by the CLI
(or by the embedding application) through ``configure_logging``. Only the
handlers installed here are replaced or silenced, so handlers the host
application attached to the root logger are left alone.
"""

import logging
import os
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Optional

from .formatters import PIIRedactingFormatter

if TYPE_CHECKING:
    from ..config.schema import LoggingConfig

# Constants
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LOG_FILE = Path("logs") / "egypt-nid.log"
MAX_LOG_FILE_SIZE = 10 * 1024 * 1024  # 10MB
BACKUP_COUNT = 5
LOG_FILE_ENV_VAR = "EGYPT_NID_LOG_FILE"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Handlers installed by configure_logging, None until first call
_console_handler: Optional[logging.StreamHandler] = None
_file_handler: Optional[RotatingFileHandler] = None

# Module-level logger for this module
logger = logging.getLogger(__name__)


def _parse_level(level: str) -> int:
    name = level.upper()
    if name not in VALID_LEVELS:
        raise ValueError(
            f"Invalid log level: {level}. Must be one of: {', '.join(VALID_LEVELS)}"
        )
    return getattr(logging, name)


def _resolve_log_file(log_file: Optional[Path]) -> Path:
    """Pick the log file path and make sure its directory exists.

    Precedence: explicit argument, then EGYPT_NID_LOG_FILE, then
    DEFAULT_LOG_FILE.
    """
    if log_file is None:
        env_log_file = os.environ.get(LOG_FILE_ENV_VAR)
        log_file = Path(env_log_file) if env_log_file else DEFAULT_LOG_FILE

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise RuntimeError(
            f"Failed to create log directory: {log_file.parent}. "
            f"Ensure write permissions are available. Error: {e}"
        ) from e
    return log_file


def _detach_handlers() -> None:
    """Remove and close the handlers a previous configure_logging installed."""
    global _console_handler, _file_handler

    root_logger = logging.getLogger()
    for handler in (_console_handler, _file_handler):
        if handler is not None:
            root_logger.removeHandler(handler)
            handler.close()
    _console_handler = None
    _file_handler = None


def configure_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    redact_pii: bool = True,
) -> None:
    """Configure logging for egypt-nid.

    Installs a console handler at ``level`` and a rotating file handler that
    always records DEBUG. Calling it again swaps out the handlers from the
    previous call; root handlers installed by anything else are untouched.

    Args:
        level: Log level for console output (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to log file. If None, uses EGYPT_NID_LOG_FILE
                 environment variable if set, else DEFAULT_LOG_FILE.
        redact_pii: Whether to mask national ID numbers in log output

    Raises:
        ValueError: If invalid log level is provided
        RuntimeError: If log directory cannot be created

    Example:
        >>> from pathlib import Path
        >>> configure_logging(level="DEBUG")
        >>> configure_logging(level="INFO", log_file=Path("custom/app.log"))
    """
    global _console_handler, _file_handler

    console_level = _parse_level(level)
    log_path = _resolve_log_file(log_file)

    _detach_handlers()

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    formatter = PIIRedactingFormatter(fmt=DEFAULT_LOG_FORMAT, redact_pii=redact_pii)

    _console_handler = logging.StreamHandler()
    _console_handler.setLevel(console_level)
    _console_handler.setFormatter(formatter)
    root_logger.addHandler(_console_handler)

    try:
        _file_handler = RotatingFileHandler(
            filename=str(log_path),
            maxBytes=MAX_LOG_FILE_SIZE,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        # Console-only logging is still usable
        logger.warning("Failed to open log file %s: %s. Logging to console only.", log_path, e)
    else:
        _file_handler.setLevel(logging.DEBUG)
        _file_handler.setFormatter(formatter)
        root_logger.addHandler(_file_handler)

    logger.debug("Logging configured at %s (redact_pii=%s)", level.upper(), redact_pii)


def configure_logging_from_config(config: "LoggingConfig") -> None:
    """Configure logging from a LoggingConfig object.

    Args:
        config: LoggingConfig with level, log file and redaction flag

    Example:
        >>> from egypt_nid.config.schema import LoggingConfig
        >>> configure_logging_from_config(LoggingConfig(level="DEBUG"))
    """
    configure_logging(
        level=config.level,
        log_file=config.log_file,
        redact_pii=config.redact_pii,
    )


def get_logger(module_name: str) -> logging.Logger:
    """Get a logger for the specified module.

    This is a convenience function that should be called with __name__
    from the calling module to create module-specific loggers.

    Args:
        module_name: Name of the module, typically __name__

    Returns:
        Logger instance for the module

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("National ID decoded")
    """
    return logging.getLogger(module_name)


@contextmanager
def suppress_console_logging(enabled: bool = True) -> Iterator[None]:
    """Temporarily silence the console handler installed by configure_logging.

    Used by commands that print machine-readable output (``--json``) so log
    lines never interleave with it. The file handler keeps logging, and other
    root handlers are not touched.

    Args:
        enabled: When False the context manager does nothing
    """
    handler = _console_handler if enabled else None
    if handler is None:
        yield
        return

    original_level = handler.level
    handler.setLevel(logging.CRITICAL + 1)
    try:
        yield
    finally:
        handler.setLevel(original_level)
