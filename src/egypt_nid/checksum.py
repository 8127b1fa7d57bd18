"""Format and checksum checks for 14-digit national IDs.

The official check digit algorithm is not publicly documented. The weighted
sum below is a best-effort approximation: a mismatch means the ID is
unconfirmed, not that it is forged. ``NationalId`` does not enforce it unless
asked to.
"""

import re
from typing import Optional


NATIONAL_ID_LENGTH = 14

# Weights applied left to right to the first 13 digits
CHECKSUM_WEIGHTS = (2, 7, 6, 5, 4, 3, 2, 7, 6, 5, 4, 3, 2)

# ASCII digits only; str.isdigit() would also accept Arabic-Indic digits
NATIONAL_ID_PATTERN = re.compile(r"[0-9]{14}")
_BODY_PATTERN = re.compile(r"[0-9]{13}")


def is_valid_format(value: Optional[str]) -> bool:
    """Check that value is exactly 14 ASCII digits.

    Domain rules (century, birth date, governorate) are not checked.

    Args:
        value: Candidate national ID, may be None

    Returns:
        True if value has the national ID shape
    """
    if not isinstance(value, str):
        return False
    return NATIONAL_ID_PATTERN.fullmatch(value) is not None


def compute_check_digit(body: str) -> int:
    """Compute the expected 14th digit for the first 13 digits of an ID.

    Args:
        body: The first 13 digits of a national ID

    Returns:
        Weighted digit sum modulo 10

    Raises:
        ValueError: If body is not exactly 13 ASCII digits
    """
    if not isinstance(body, str) or _BODY_PATTERN.fullmatch(body) is None:
        raise ValueError(
            f"Checksum body must be exactly 13 digits, got: {body!r}"
        )
    total = sum(int(digit) * weight for digit, weight in zip(body, CHECKSUM_WEIGHTS))
    return total % 10


def validate_checksum(value: Optional[str]) -> bool:
    """Check the 14th digit of a national ID against the weighted checksum.

    Never raises: a malformed value simply fails the check.

    Args:
        value: Candidate national ID

    Returns:
        True if value is well-formed and its last digit matches the checksum

    Example:
        >>> validate_checksum("30101011234565")
        True
        >>> validate_checksum("30101011234568")
        False
    """
    if not is_valid_format(value):
        return False
    return compute_check_digit(value[:13]) == int(value[13])
