"""Human-readable renderings of a national ID.

Every function reads only the public fields of ``NationalId``. The grouped
formats split the ID into century, birth date, governorate and the final five
digits (serial plus check digit)::

    3-010101-01-23458
"""

from egypt_nid.localization import english_name
from egypt_nid.national_id import NationalId


MASK = "********"


def _segments(national_id: NationalId) -> tuple[str, str, str, str]:
    value = national_id.value
    return value[0], value[1:7], value[7:9], value[9:14]


def format_with_dashes(national_id: NationalId) -> str:
    """Format as ``C-YYMMDD-GG-SSSSK``, e.g. ``3-010101-01-23458``."""
    return "-".join(_segments(national_id))


def format_with_spaces(national_id: NationalId) -> str:
    """Format as ``C YYMMDD GG SSSSK``, e.g. ``3 010101 01 23458``."""
    return " ".join(_segments(national_id))


def format_with_brackets(national_id: NationalId) -> str:
    """Format as ``[C][YYMMDD][GG][SSSSK]``, e.g. ``[3][010101][01][23458]``."""
    return "".join(f"[{segment}]" for segment in _segments(national_id))


def format_masked(national_id: NationalId) -> str:
    """Mask for display, keeping the first 3 and last 2 digits.

    Example:
        >>> format_masked(NationalId("30101011234567"))
        '301********67'
    """
    value = national_id.value
    return f"{value[:3]}{MASK}{value[12:]}"


def format_detailed(national_id: NationalId) -> str:
    """Format as a multi-line breakdown of the decoded fields.

    Example output::

        Century: 3 (2000s)
        Birth Date: 01/01/2001
        Governorate: 01 (Cairo)
        Serial: 2345
        Gender: Male
    """
    century = "1900s" if national_id.century_digit == "2" else "2000s"
    lines = [
        f"Century: {national_id.century_digit} ({century})",
        f"Birth Date: {national_id.birth_date:%d/%m/%Y}",
        f"Governorate: {national_id.governorate_code:02d} "
        f"({english_name(national_id.governorate)})",
        f"Serial: {national_id.serial_number:04d}",
        f"Gender: {english_name(national_id.gender)}",
    ]
    return "\n".join(lines)


FORMAT_STYLES = {
    "dashes": format_with_dashes,
    "spaces": format_with_spaces,
    "brackets": format_with_brackets,
    "masked": format_masked,
    "detailed": format_detailed,
}


def format_national_id(national_id: NationalId, style: str = "dashes") -> str:
    """Format a national ID in a named style.

    Args:
        national_id: ID to format
        style: One of dashes, spaces, brackets, masked, detailed

    Returns:
        Formatted string

    Raises:
        ValueError: If style is not recognised
    """
    try:
        formatter = FORMAT_STYLES[style]
    except KeyError:
        raise ValueError(
            f"Unknown format style: {style}. "
            f"Must be one of: {', '.join(FORMAT_STYLES)}"
        ) from None
    return formatter(national_id)
