"""Bulk validation of national IDs held in a CSV column.

This module validates every row, collecting all issues before reporting so a
whole file can be fixed in one pass rather than one error at a time.
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Optional

import pandas as pd

from egypt_nid.checksum import validate_checksum as checksum_matches
from egypt_nid.localization import english_name
from egypt_nid.logging_audit import get_logger
from egypt_nid.national_id import try_create
from egypt_nid.utils.exceptions import NationalIdErrorKind, ValidationError


logger = get_logger(__name__)

DEFAULT_ID_COLUMN = "national_id"

# Limit of issues listed per section in the text report
REPORT_ISSUE_LIMIT = 20

SUGGESTIONS = {
    NationalIdErrorKind.INVALID_FORMAT: (
        "National ID must be exactly 14 digits; check for spaces, dashes or "
        "a spreadsheet that converted it to a number"
    ),
    NationalIdErrorKind.INVALID_CHECKSUM: (
        "Verify the last digit against the physical card (checksum is unofficial)"
    ),
    NationalIdErrorKind.INVALID_BIRTH_DATE: (
        "First digit must be 2 or 3 and digits 2-7 must form a real YYMMDD date"
    ),
    NationalIdErrorKind.INVALID_GOVERNORATE_CODE: (
        "Digits 8-9 must be a known governorate code (01-35 or 88)"
    ),
}


class IssueSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"
    WARNING = "warning"


@dataclass
class ValidationIssue:
    """Individual validation issue with context and suggested fix.

    Attributes:
        row_number: 1-indexed row number (including header) for user readability
        column_name: Name of the column with the issue
        severity: ERROR or WARNING level
        message: Description of what's wrong
        suggestion: Actionable guidance on how to fix the issue
        kind: Rejection reason for invalid IDs, None for other issues
    """

    row_number: int
    column_name: str
    severity: IssueSeverity
    message: str
    suggestion: str
    kind: Optional[NationalIdErrorKind] = None

    def to_dict(self) -> dict:
        return {
            "row_number": self.row_number,
            "column_name": self.column_name,
            "severity": self.severity.value,
            "message": self.message,
            "suggestion": self.suggestion,
            "kind": self.kind.value if self.kind else None,
        }


@dataclass
class BatchValidationResult:
    """Batch validation results with statistics and issues.

    Attributes:
        total_rows: Total number of data rows processed
        valid_rows: Number of rows with no errors (warnings OK)
        error_rows: Number of rows with at least one error
        warning_rows: Number of rows with at least one warning
        duplicate_ids: National IDs that appear on more than one row
        missing_ids_count: Count of rows with an empty ID cell
        gender_counts: Valid IDs per gender ("male"/"female")
        region_counts: Valid IDs per region English name
        all_errors: List of all error-level issues
        all_warnings: List of all warning-level issues
    """

    total_rows: int
    valid_rows: int
    error_rows: int
    warning_rows: int
    duplicate_ids: list[str] = field(default_factory=list)
    missing_ids_count: int = 0
    gender_counts: dict[str, int] = field(default_factory=dict)
    region_counts: dict[str, int] = field(default_factory=dict)
    all_errors: list[ValidationIssue] = field(default_factory=list)
    all_warnings: list[ValidationIssue] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Check if any error-level issues exist."""
        return len(self.all_errors) > 0

    @property
    def has_warnings(self) -> bool:
        """Check if any warning-level issues exist."""
        return len(self.all_warnings) > 0

    def format_report(self) -> str:
        """Format validation results as human-readable report.

        National IDs are not echoed in the report; rows are referenced by
        number only.

        Returns:
            Multi-line string with validation summary and detailed issues
        """
        lines = []
        lines.append("=" * 60)
        lines.append("NATIONAL ID VALIDATION REPORT")
        lines.append("=" * 60)
        lines.append("")

        lines.append("SUMMARY:")
        lines.append(f"  Total rows: {self.total_rows}")
        lines.append(f"  Valid rows: {self.valid_rows}")
        lines.append(f"  Rows with errors: {self.error_rows}")
        lines.append(f"  Rows with warnings: {self.warning_rows}")
        lines.append("")

        if self.duplicate_ids or self.missing_ids_count > 0:
            lines.append("BATCH STATISTICS:")
            if self.duplicate_ids:
                lines.append(f"  Duplicate national IDs: {len(self.duplicate_ids)}")
            if self.missing_ids_count > 0:
                lines.append(f"  Missing national IDs: {self.missing_ids_count}")
            lines.append("")

        if self.gender_counts or self.region_counts:
            lines.append("DEMOGRAPHICS (valid rows):")
            for gender, count in sorted(self.gender_counts.items()):
                lines.append(f"  {gender}: {count}")
            for region, count in sorted(self.region_counts.items()):
                lines.append(f"  {region}: {count}")
            lines.append("")

        for title, issues in (("ERRORS", self.all_errors), ("WARNINGS", self.all_warnings)):
            if not issues:
                continue
            lines.append(f"{title} ({len(issues)}):")
            for issue in issues[:REPORT_ISSUE_LIMIT]:
                lines.append(
                    f"  Row {issue.row_number} [{issue.column_name}]: {issue.message}"
                )
                lines.append(f"    → {issue.suggestion}")
            if len(issues) > REPORT_ISSUE_LIMIT:
                lines.append(
                    f"  ... and {len(issues) - REPORT_ISSUE_LIMIT} more {title.lower()}"
                )
            lines.append("")

        lines.append("=" * 60)
        if not self.has_errors and not self.has_warnings:
            lines.append("RESULT: ✓ All validations passed")
        elif not self.has_errors:
            lines.append("RESULT: ✓ Validation passed with warnings")
        else:
            lines.append("RESULT: ✗ Validation failed - please fix errors above")
        lines.append("=" * 60)

        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Export validation results as structured dictionary for JSON serialization.

        Returns:
            Dictionary with all validation results
        """
        return {
            "total_rows": self.total_rows,
            "valid_rows": self.valid_rows,
            "error_rows": self.error_rows,
            "warning_rows": self.warning_rows,
            "duplicate_count": len(self.duplicate_ids),
            "missing_ids_count": self.missing_ids_count,
            "gender_counts": self.gender_counts,
            "region_counts": self.region_counts,
            "errors": [e.to_dict() for e in self.all_errors],
            "warnings": [w.to_dict() for w in self.all_warnings],
        }


def load_national_ids_csv(
    file_path: Path, column: str = DEFAULT_ID_COLUMN
) -> pd.DataFrame:
    """Load a CSV file whose ``column`` holds national IDs.

    All columns are read as strings so IDs are never turned into floats.

    Args:
        file_path: Path to CSV file
        column: Name of the column holding national IDs

    Returns:
        DataFrame with the CSV contents

    Raises:
        FileNotFoundError: If CSV file does not exist
        ValidationError: If the file cannot be parsed or lacks the column
    """
    logger.info(f"Loading CSV from {file_path}")

    if not file_path.exists():
        raise FileNotFoundError(f"CSV file not found: {file_path}")

    try:
        df = pd.read_csv(file_path, dtype=str, encoding="utf-8")
    except (ValueError, OSError, pd.errors.ParserError) as e:
        raise ValidationError(
            f"Failed to read CSV file {file_path}. Ensure file is valid CSV "
            f"with UTF-8 encoding. Error: {e}"
        ) from e

    if column not in df.columns:
        raise ValidationError(
            f"CSV file {file_path} has no '{column}' column. "
            f"Available columns: {', '.join(map(str, df.columns))}"
        )

    logger.info(f"Loaded {len(df)} rows from {file_path}")
    return df


def _cell_to_text(raw_value) -> str:
    # Frames read without dtype=str hold IDs as floats (30101010123458.0)
    if isinstance(raw_value, float) and raw_value.is_integer():
        return str(int(raw_value))
    return str(raw_value).strip()


def validate_national_ids(
    df: pd.DataFrame,
    column: str = DEFAULT_ID_COLUMN,
    validate_checksum: bool = False,
    warn_on_likely_expired: bool = True,
    warn_on_checksum_mismatch: bool = False,
    today: Optional[date] = None,
) -> BatchValidationResult:
    """Validate every national ID in a DataFrame column.

    Errors: empty cells, IDs rejected by ``NationalId`` and IDs that appear on
    more than one row. Warnings: cards past their estimated expiry and, when
    requested, IDs whose check digit does not match while checksum
    enforcement is off. Collects all issues before returning (not fail-fast).

    Args:
        df: DataFrame holding the IDs
        column: Name of the column holding national IDs
        validate_checksum: Whether a check digit mismatch is an error
        warn_on_likely_expired: Whether to warn about likely-expired cards
        warn_on_checksum_mismatch: Whether to warn about unconfirmed check
            digits when validate_checksum is off
        today: Reference date for expiry checks. Defaults to today.

    Returns:
        BatchValidationResult containing all errors, warnings, and statistics

    Raises:
        ValueError: If DataFrame is empty or missing the ID column
    """
    logger.info("Validation started")

    if df.empty:
        raise ValueError("DataFrame is empty - no data to validate")

    if column not in df.columns:
        raise ValueError(f"DataFrame missing required column: {column}")

    today = today or date.today()
    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []
    gender_counts: Counter = Counter()
    region_counts: Counter = Counter()
    missing_ids_count = 0
    parsed_ids: dict[int, str] = {}

    logger.debug("Validating national ID values")
    for position, raw_value in enumerate(df[column].tolist()):
        row_num = position + 2  # +2 for 1-indexed + header row

        value = "" if pd.isna(raw_value) else _cell_to_text(raw_value)
        if not value:
            missing_ids_count += 1
            errors.append(
                ValidationIssue(
                    row_number=row_num,
                    column_name=column,
                    severity=IssueSeverity.ERROR,
                    message="Missing national ID",
                    suggestion="Provide the 14-digit national ID or remove the row",
                )
            )
            continue

        result = try_create(value, validate_checksum=validate_checksum)
        if not result.success:
            errors.append(
                ValidationIssue(
                    row_number=row_num,
                    column_name=column,
                    severity=IssueSeverity.ERROR,
                    message=str(result.error),
                    suggestion=SUGGESTIONS[result.error.kind],
                    kind=result.error.kind,
                )
            )
            continue

        national_id = result.national_id
        parsed_ids[position] = value
        gender_counts[national_id.gender.value] += 1
        region_counts[english_name(national_id.region)] += 1

        if warn_on_checksum_mismatch and not validate_checksum and not checksum_matches(value):
            warnings.append(
                ValidationIssue(
                    row_number=row_num,
                    column_name=column,
                    severity=IssueSeverity.WARNING,
                    message="Check digit could not be confirmed",
                    suggestion=SUGGESTIONS[NationalIdErrorKind.INVALID_CHECKSUM],
                    kind=NationalIdErrorKind.INVALID_CHECKSUM,
                )
            )

        if warn_on_likely_expired and national_id.is_likely_expired_on(today):
            warnings.append(
                ValidationIssue(
                    row_number=row_num,
                    column_name=column,
                    severity=IssueSeverity.WARNING,
                    message=(
                        "Card is likely expired (estimated expiry "
                        f"{national_id.estimated_expiry_date.isoformat()})"
                    ),
                    suggestion="Ask the holder for a renewed card",
                )
            )

    # Batch-level validation
    logger.debug("Validating batch-level data quality")
    occurrences = Counter(parsed_ids.values())
    duplicate_ids = [value for value, count in occurrences.items() if count > 1]
    if duplicate_ids:
        logger.debug(f"Found {len(duplicate_ids)} duplicate national IDs")
        duplicate_set = set(duplicate_ids)
        for position, value in parsed_ids.items():
            if value in duplicate_set:
                errors.append(
                    ValidationIssue(
                        row_number=position + 2,
                        column_name=column,
                        severity=IssueSeverity.ERROR,
                        message="Duplicate national ID",
                        suggestion="Each person should appear only once",
                    )
                )

    error_row_numbers = set(e.row_number for e in errors)
    warning_row_numbers = set(w.row_number for w in warnings)
    errors.sort(key=lambda issue: issue.row_number)

    result = BatchValidationResult(
        total_rows=len(df),
        valid_rows=len(df) - len(error_row_numbers),
        error_rows=len(error_row_numbers),
        warning_rows=len(warning_row_numbers),
        duplicate_ids=duplicate_ids,
        missing_ids_count=missing_ids_count,
        gender_counts=dict(gender_counts),
        region_counts=dict(region_counts),
        all_errors=errors,
        all_warnings=warnings,
    )

    logger.info(f"Validation errors found: {len(errors)}")
    if warnings:
        logger.info(f"Validation warnings: {len(warnings)}")

    return result


def export_invalid_rows(
    df: pd.DataFrame, result: BatchValidationResult, output_path: Path
) -> None:
    """Export rows with validation errors to separate CSV file.

    Args:
        df: Original DataFrame
        result: BatchValidationResult containing error information
        output_path: Path where error CSV should be written

    Raises:
        ValueError: If no errors exist in the result
        FileNotFoundError: If output_path parent directory doesn't exist
    """
    logger.info(f"Exporting invalid rows to {output_path}")

    if not result.has_errors:
        raise ValueError("No validation errors to export")

    if not output_path.parent.exists():
        raise FileNotFoundError(
            f"Output directory does not exist: {output_path.parent}"
        )

    error_row_numbers = sorted(set(e.row_number for e in result.all_errors))

    # Convert to 0-indexed positions (row_num is 1-indexed + header)
    error_positions = [r - 2 for r in error_row_numbers]
    error_df = df.iloc[error_positions].copy()

    error_descriptions = []
    for row_num in error_row_numbers:
        row_errors = [e for e in result.all_errors if e.row_number == row_num]
        error_descriptions.append("; ".join(e.message for e in row_errors))

    error_df["error_description"] = error_descriptions

    error_df.to_csv(output_path, index=False, encoding="utf-8")
    logger.info(f"Exported {len(error_df)} invalid rows to {output_path}")
