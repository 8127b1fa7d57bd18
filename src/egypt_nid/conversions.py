"""String convenience wrappers around ``NationalId``.

These accept any candidate string (including None) and never raise for bad
input, which makes them handy in form validators and list comprehensions::

    ids = [nid for nid in map(to_national_id, raw_values) if nid]
"""

from typing import Optional

from egypt_nid.checksum import is_valid_format, validate_checksum
from egypt_nid.national_id import NationalId, ParseResult, try_create


def is_valid_national_id(value: Optional[str], validate_checksum: bool = False) -> bool:
    """Check whether value is a valid national ID."""
    return try_create(value, validate_checksum=validate_checksum).success


def to_national_id(
    value: Optional[str], validate_checksum: bool = False
) -> Optional[NationalId]:
    """Convert value to a NationalId, or None if it is not valid."""
    return try_create(value, validate_checksum=validate_checksum).national_id


def try_parse(value: Optional[str], validate_checksum: bool = False) -> ParseResult:
    """Parse value as a national ID without raising."""
    return try_create(value, validate_checksum=validate_checksum)


def has_valid_format(value: Optional[str]) -> bool:
    """Check only the 14-digit shape of value."""
    return is_valid_format(value)


def has_valid_checksum(value: Optional[str]) -> bool:
    """Check only the check digit of value."""
    return validate_checksum(value)
