"""
Shared pytest configuration and fixtures.

This module provides fixtures and configuration used across all test suites
(unit and integration tests).
"""

import pytest
from datetime import date
from pathlib import Path
from typing import Generator

from egypt_nid.logging_audit import logger as logger_module


# Valid IDs whose weighted check digit also matches
CAIRO_MALE_2001 = "30101010123458"
DAKAHLIA_FEMALE_2001 = "30101011234565"
CAIRO_MALE_1990 = "29001010123453"
CAIRO_FEMALE_LEAP_DAY = "30002290100121"
GIZA_MALE_2010 = "31003152100319"

# Fixed reference date for age and card expiry assertions
REFERENCE_DATE = date(2026, 10, 19)


@pytest.fixture(autouse=True)
def isolated_logging(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Keep log files out of the working tree and drop handlers between tests.

    Args:
        tmp_path: Pytest's temporary directory fixture.
        monkeypatch: Pytest's monkeypatch fixture.
    """
    monkeypatch.setenv("EGYPT_NID_LOG_FILE", str(tmp_path / "logs" / "egypt-nid.log"))
    yield
    logger_module._detach_handlers()


@pytest.fixture
def project_root() -> Path:
    """
    Return the project root directory.

    Returns:
        Path: Absolute path to the project root directory.
    """
    return Path(__file__).parent.parent


@pytest.fixture
def reference_date() -> date:
    """Return the fixed "today" used by date-dependent tests."""
    return REFERENCE_DATE


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Generator[Path, None, None]:
    """
    Create a temporary configuration file for testing.

    Args:
        tmp_path: Pytest's temporary directory fixture.

    Yields:
        Path: Path to the temporary configuration file.
    """
    config_file = tmp_path / "test_config.json"
    config_file.write_text(
        '{"validation": {"validate_checksum": true, "id_column": "nid"}, '
        '"logging": {"level": "DEBUG", "redact_pii": false}}'
    )
    yield config_file


@pytest.fixture
def sample_csv_data() -> str:
    """
    Return sample CSV data for batch validation.

    Row 3 has a bad format, row 5 repeats row 2 and row 6 is empty.

    Returns:
        str: Sample CSV content with a national_id column.
    """
    return (
        "name,national_id\n"
        f"Ahmed,{CAIRO_MALE_2001}\n"
        "Mona,1234\n"
        f"Sara,{DAKAHLIA_FEMALE_2001}\n"
        f"Omar,{CAIRO_MALE_2001}\n"
        "Laila,\n"
    )


@pytest.fixture
def sample_csv_file(tmp_path: Path, sample_csv_data: str) -> Path:
    """
    Write sample_csv_data to a temporary CSV file.

    Returns:
        Path: Path to the CSV file.
    """
    csv_file = tmp_path / "people.csv"
    csv_file.write_text(sample_csv_data, encoding="utf-8")
    return csv_file


@pytest.fixture
def valid_csv_file(tmp_path: Path) -> Path:
    """
    Write a CSV file whose IDs are all valid and distinct.

    Returns:
        Path: Path to the CSV file.
    """
    csv_file = tmp_path / "valid.csv"
    csv_file.write_text(
        "name,national_id\n"
        f"Ahmed,{CAIRO_MALE_2001}\n"
        f"Sara,{DAKAHLIA_FEMALE_2001}\n"
        f"Youssef,{GIZA_MALE_2010}\n",
        encoding="utf-8",
    )
    return csv_file
