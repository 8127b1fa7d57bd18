"""Custom log formatters for egypt-nid.

This module provides specialized formatters for logging, including redaction
of national ID numbers.
"""

import logging
import re
from typing import List, Tuple


class PIIRedactingFormatter(logging.Formatter):
    """Formatter that masks national ID numbers in log messages.

    A national ID discloses birth date, gender and governorate, so when
    redaction is enabled every standalone 14-digit run is reduced to its
    first digit and last three digits (``3**********458``).

    Attributes:
        redact_pii: Whether to enable redaction
        patterns: List of (regex_pattern, replacement) tuples for redaction

    Example:
        >>> formatter = PIIRedactingFormatter(
        ...     fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        ...     redact_pii=True
        ... )
        >>> handler = logging.StreamHandler()
        >>> handler.setFormatter(formatter)
    """

    def __init__(
        self,
        fmt: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt: str | None = None,
        redact_pii: bool = False,
    ) -> None:
        """Initialize the PIIRedactingFormatter.

        Args:
            fmt: Log message format string
            datefmt: Date format string (optional)
            redact_pii: Whether to enable redaction
        """
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.redact_pii = redact_pii

        self.patterns: List[Tuple[re.Pattern[str], str]] = [
            # National ID: 14 digits not embedded in a longer number
            (
                re.compile(r"(?<!\d)(\d)\d{10}(\d{3})(?!\d)"),
                r"\1**********\2",
            ),
        ]

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record with optional redaction.

        Args:
            record: Log record to format

        Returns:
            Formatted log message with national IDs masked if enabled
        """
        original = super().format(record)

        if self.redact_pii:
            for pattern, replacement in self.patterns:
                original = pattern.sub(replacement, original)

        return original
