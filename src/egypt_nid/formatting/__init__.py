"""Formatting module.

This module renders national IDs for display: grouped, masked and detailed.
"""

from egypt_nid.formatting.formatter import (
    FORMAT_STYLES,
    format_detailed,
    format_masked,
    format_national_id,
    format_with_brackets,
    format_with_dashes,
    format_with_spaces,
)

__all__ = [
    "FORMAT_STYLES",
    "format_detailed",
    "format_masked",
    "format_national_id",
    "format_with_brackets",
    "format_with_dashes",
    "format_with_spaces",
]
