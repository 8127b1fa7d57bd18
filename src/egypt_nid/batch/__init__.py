"""Batch module.

This module provides bulk validation of national IDs stored in CSV files.
"""

from egypt_nid.batch.validator import (
    BatchValidationResult,
    IssueSeverity,
    ValidationIssue,
    export_invalid_rows,
    load_national_ids_csv,
    validate_national_ids,
)

__all__ = [
    "BatchValidationResult",
    "IssueSeverity",
    "ValidationIssue",
    "export_invalid_rows",
    "load_national_ids_csv",
    "validate_national_ids",
]
