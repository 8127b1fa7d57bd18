"""Unit tests for batch validator module.

Tests row-level validation, batch-level validation (missing and duplicate
IDs), warnings, report formatting, CSV loading and export functionality.
"""

from datetime import date
from pathlib import Path

import pandas as pd
import pytest

from egypt_nid.batch.validator import (
    BatchValidationResult,
    IssueSeverity,
    ValidationIssue,
    export_invalid_rows,
    load_national_ids_csv,
    validate_national_ids,
)
from egypt_nid.utils.exceptions import NationalIdErrorKind, ValidationError


CAIRO_MALE_2001 = "30101010123458"
DAKAHLIA_FEMALE_2001 = "30101011234565"
GIZA_MALE_2010 = "31003152100319"
BAD_CHECKSUM = "30101011234568"
REFERENCE_DATE = date(2026, 10, 19)


@pytest.fixture
def mixed_df() -> pd.DataFrame:
    """Valid, malformed, duplicate and missing IDs."""
    return pd.DataFrame(
        {
            "name": ["Ahmed", "Mona", "Sara", "Omar", "Laila"],
            "national_id": [CAIRO_MALE_2001, "1234", DAKAHLIA_FEMALE_2001, CAIRO_MALE_2001, None],
        }
    )


class TestValidateNationalIds:
    """Test suite for validate_national_ids function."""

    def test_all_valid(self):
        """Test validation with completely valid data (no errors, no warnings)."""
        # Arrange
        df = pd.DataFrame({"national_id": [GIZA_MALE_2010, DAKAHLIA_FEMALE_2001]})

        # Act
        result = validate_national_ids(df, warn_on_likely_expired=False)

        # Assert
        assert result.total_rows == 2
        assert result.valid_rows == 2
        assert result.error_rows == 0
        assert result.warning_rows == 0
        assert not result.has_errors
        assert not result.has_warnings
        assert result.gender_counts == {"male": 1, "female": 1}
        assert result.region_counts == {"Greater Cairo": 1, "Delta": 1}

    def test_mixed_rows(self, mixed_df):
        """Errors are collected for every bad row, not just the first."""
        # Act
        result = validate_national_ids(mixed_df, warn_on_likely_expired=False)

        # Assert
        assert result.total_rows == 5
        assert result.error_rows == 4
        assert result.valid_rows == 1
        assert result.missing_ids_count == 1
        assert result.duplicate_ids == [CAIRO_MALE_2001]
        assert [e.row_number for e in result.all_errors] == [2, 3, 5, 6]
        assert all(e.severity is IssueSeverity.ERROR for e in result.all_errors)

    def test_row_numbers_count_header(self, mixed_df):
        """Row numbers are 1-indexed and include the header row."""
        result = validate_national_ids(mixed_df, warn_on_likely_expired=False)

        format_error = next(e for e in result.all_errors if e.row_number == 3)
        assert format_error.kind is NationalIdErrorKind.INVALID_FORMAT
        assert format_error.column_name == "national_id"
        assert "14 digits" in format_error.suggestion

    def test_missing_id(self, mixed_df):
        """Empty cells are errors without a kind."""
        result = validate_national_ids(mixed_df, warn_on_likely_expired=False)

        missing = next(e for e in result.all_errors if e.row_number == 6)
        assert missing.message == "Missing national ID"
        assert missing.kind is None

    def test_blank_string_is_missing(self):
        """Whitespace-only cells count as missing."""
        df = pd.DataFrame({"national_id": ["   ", GIZA_MALE_2010]})

        result = validate_national_ids(df, warn_on_likely_expired=False)

        assert result.missing_ids_count == 1
        assert result.error_rows == 1

    def test_surrounding_whitespace_is_stripped(self):
        """Cells are stripped before parsing."""
        df = pd.DataFrame({"national_id": [f" {GIZA_MALE_2010} "]})

        result = validate_national_ids(df, warn_on_likely_expired=False)

        assert not result.has_errors

    def test_integer_column(self):
        """Numeric cells are converted to strings."""
        df = pd.DataFrame({"national_id": [31003152100319]})

        result = validate_national_ids(df, warn_on_likely_expired=False)

        assert not result.has_errors

    def test_float_column(self):
        """A blank cell makes pandas store IDs as floats; those still parse."""
        # Arrange
        df = pd.DataFrame({"national_id": [30101010123458, None]})

        # Act
        result = validate_national_ids(df, warn_on_likely_expired=False)

        # Assert
        assert df["national_id"].dtype == "float64"
        assert result.valid_rows == 1
        assert [e.message for e in result.all_errors] == ["Missing national ID"]
        assert result.gender_counts == {"male": 1}

    def test_fractional_float_is_invalid_format(self):
        df = pd.DataFrame({"national_id": [3.5]})

        result = validate_national_ids(df, warn_on_likely_expired=False)

        assert result.all_errors[0].kind == NationalIdErrorKind.INVALID_FORMAT

    @pytest.mark.parametrize(
        "value,kind",
        [
            ("10101010123458", NationalIdErrorKind.INVALID_BIRTH_DATE),
            ("30101019912345", NationalIdErrorKind.INVALID_GOVERNORATE_CODE),
        ],
    )
    def test_domain_errors_carry_kind(self, value, kind):
        """Rejected IDs report their rejection kind."""
        df = pd.DataFrame({"national_id": [value]})

        result = validate_national_ids(df, warn_on_likely_expired=False)

        assert result.all_errors[0].kind is kind

    def test_checksum_enforced(self):
        """Mismatching check digit is an error when enforced."""
        df = pd.DataFrame({"national_id": [BAD_CHECKSUM]})

        result = validate_national_ids(
            df, validate_checksum=True, warn_on_likely_expired=False
        )

        assert result.error_rows == 1
        assert result.all_errors[0].kind is NationalIdErrorKind.INVALID_CHECKSUM

    def test_checksum_mismatch_warning(self):
        """Mismatching check digit is a warning when requested but not enforced."""
        df = pd.DataFrame({"national_id": [BAD_CHECKSUM, DAKAHLIA_FEMALE_2001]})

        result = validate_national_ids(
            df, warn_on_likely_expired=False, warn_on_checksum_mismatch=True
        )

        assert not result.has_errors
        assert result.warning_rows == 1
        assert result.all_warnings[0].row_number == 2
        assert result.all_warnings[0].kind is NationalIdErrorKind.INVALID_CHECKSUM

    def test_checksum_mismatch_silent_by_default(self):
        """No checksum warnings unless requested."""
        df = pd.DataFrame({"national_id": [BAD_CHECKSUM]})

        result = validate_national_ids(df, warn_on_likely_expired=False)

        assert not result.has_warnings

    def test_likely_expired_warning(self):
        """Cards past their estimated expiry produce warnings."""
        df = pd.DataFrame({"national_id": [CAIRO_MALE_2001, GIZA_MALE_2010]})

        result = validate_national_ids(df, today=REFERENCE_DATE)

        assert not result.has_errors
        assert result.valid_rows == 2
        assert result.warning_rows == 1
        warning = result.all_warnings[0]
        assert warning.row_number == 2
        assert warning.severity is IssueSeverity.WARNING
        assert "2022-01-01" in warning.message

    def test_likely_expired_warning_disabled(self):
        df = pd.DataFrame({"national_id": [CAIRO_MALE_2001]})

        result = validate_national_ids(
            df, warn_on_likely_expired=False, today=REFERENCE_DATE
        )

        assert not result.has_warnings

    def test_custom_column(self):
        """IDs can live in any named column."""
        df = pd.DataFrame({"nid": [GIZA_MALE_2010]})

        result = validate_national_ids(df, column="nid", warn_on_likely_expired=False)

        assert result.valid_rows == 1

    def test_empty_dataframe_raises(self):
        with pytest.raises(ValueError, match="empty"):
            validate_national_ids(pd.DataFrame({"national_id": []}))

    def test_missing_column_raises(self):
        with pytest.raises(ValueError, match="missing required column: national_id"):
            validate_national_ids(pd.DataFrame({"id": [GIZA_MALE_2010]}))


class TestBatchValidationResult:
    """Test suite for report and dict output."""

    def test_format_report_failed(self, mixed_df):
        """Report lists summary, statistics and errors."""
        # Arrange
        result = validate_national_ids(mixed_df, warn_on_likely_expired=False)

        # Act
        report = result.format_report()

        # Assert
        assert "NATIONAL ID VALIDATION REPORT" in report
        assert "Total rows: 5" in report
        assert "Rows with errors: 4" in report
        assert "Duplicate national IDs: 1" in report
        assert "Missing national IDs: 1" in report
        assert "ERRORS (4):" in report
        assert "Row 3 [national_id]" in report
        assert "RESULT: ✗ Validation failed" in report

    def test_format_report_does_not_echo_ids(self, mixed_df):
        """IDs are PII and never appear in the report."""
        result = validate_national_ids(mixed_df, today=REFERENCE_DATE)

        report = result.format_report()

        assert CAIRO_MALE_2001 not in report
        assert DAKAHLIA_FEMALE_2001 not in report

    def test_format_report_passed(self):
        df = pd.DataFrame({"national_id": [GIZA_MALE_2010]})
        result = validate_national_ids(df, warn_on_likely_expired=False)

        report = result.format_report()

        assert "RESULT: ✓ All validations passed" in report
        assert "male: 1" in report
        assert "Greater Cairo: 1" in report

    def test_format_report_warnings_only(self):
        df = pd.DataFrame({"national_id": [CAIRO_MALE_2001]})
        result = validate_national_ids(df, today=REFERENCE_DATE)

        report = result.format_report()

        assert "WARNINGS (1):" in report
        assert "RESULT: ✓ Validation passed with warnings" in report

    def test_format_report_truncates_long_lists(self):
        """Only the first 20 issues are listed."""
        df = pd.DataFrame({"national_id": ["bad"] * 25})
        result = validate_national_ids(df, warn_on_likely_expired=False)

        report = result.format_report()

        assert "... and 5 more errors" in report

    def test_to_dict(self, mixed_df):
        """Dictionary output is JSON friendly."""
        result = validate_national_ids(mixed_df, warn_on_likely_expired=False)

        data = result.to_dict()

        assert data["total_rows"] == 5
        assert data["error_rows"] == 4
        assert data["duplicate_count"] == 1
        assert data["missing_ids_count"] == 1
        assert data["gender_counts"] == {"male": 2, "female": 1}
        assert data["warnings"] == []
        assert data["errors"][1] == {
            "row_number": 3,
            "column_name": "national_id",
            "severity": "error",
            "message": "National ID must be exactly 14 digits long and contain digits only.",
            "suggestion": data["errors"][1]["suggestion"],
            "kind": "invalid_format",
        }

    def test_issue_to_dict_without_kind(self):
        issue = ValidationIssue(
            row_number=2,
            column_name="national_id",
            severity=IssueSeverity.WARNING,
            message="m",
            suggestion="s",
        )

        assert issue.to_dict()["kind"] is None

    def test_empty_result_flags(self):
        result = BatchValidationResult(
            total_rows=0, valid_rows=0, error_rows=0, warning_rows=0
        )

        assert not result.has_errors
        assert not result.has_warnings


class TestLoadNationalIdsCsv:
    """Test suite for load_national_ids_csv."""

    def test_load(self, sample_csv_file):
        """IDs are loaded as strings."""
        df = load_national_ids_csv(sample_csv_file)

        assert len(df) == 5
        assert df["national_id"].iloc[0] == CAIRO_MALE_2001

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="CSV file not found"):
            load_national_ids_csv(tmp_path / "nope.csv")

    def test_missing_column(self, sample_csv_file):
        with pytest.raises(ValidationError, match="no 'nid' column"):
            load_national_ids_csv(sample_csv_file, column="nid")

    def test_unreadable_file(self, tmp_path):
        """Non-UTF-8 content is reported as a ValidationError."""
        bad_file = tmp_path / "bad.csv"
        bad_file.write_bytes(b"national_id\n\xff\xfe\xfa\xfb\n")

        with pytest.raises(ValidationError, match="Failed to read CSV file"):
            load_national_ids_csv(bad_file)


class TestExportInvalidRows:
    """Test suite for export_invalid_rows."""

    def test_export(self, mixed_df, tmp_path):
        """Invalid rows are written with their error descriptions."""
        # Arrange
        result = validate_national_ids(mixed_df, warn_on_likely_expired=False)
        output_path = tmp_path / "errors.csv"

        # Act
        export_invalid_rows(mixed_df, result, output_path)

        # Assert
        exported = pd.read_csv(output_path, dtype=str)
        assert list(exported["name"]) == ["Ahmed", "Mona", "Omar", "Laila"]
        assert exported["error_description"].iloc[0] == "Duplicate national ID"
        assert exported["error_description"].iloc[3] == "Missing national ID"

    def test_export_without_errors_raises(self, tmp_path):
        df = pd.DataFrame({"national_id": [GIZA_MALE_2010]})
        result = validate_national_ids(df, warn_on_likely_expired=False)

        with pytest.raises(ValueError, match="No validation errors"):
            export_invalid_rows(df, result, tmp_path / "errors.csv")

    def test_export_missing_directory_raises(self, mixed_df, tmp_path):
        result = validate_national_ids(mixed_df, warn_on_likely_expired=False)

        with pytest.raises(FileNotFoundError, match="Output directory does not exist"):
            export_invalid_rows(mixed_df, result, tmp_path / "missing" / "errors.csv")
