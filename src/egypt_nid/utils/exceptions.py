"""Custom exception classes for egypt-nid.

All exceptions inherit from EgyptNidError to allow catching all custom exceptions.
"""

from enum import Enum
from typing import Optional


class EgyptNidError(Exception):
    """Base exception for all egypt-nid custom exceptions."""

    pass


class ValidationError(EgyptNidError):
    """Raised when input data validation fails.

    Examples:
        - Malformed national ID
        - Unreadable batch CSV file
    """

    pass


class ConfigurationError(EgyptNidError):
    """Raised when configuration loading or validation fails.

    Examples:
        - Invalid configuration file format
        - Configuration value out of range
    """

    pass


class NationalIdErrorKind(Enum):
    """Reason a candidate string was rejected as a national ID.

    Attributes:
        INVALID_FORMAT: Empty, not 14 characters long, or contains non-digits
        INVALID_CHECKSUM: Checksum enforcement was requested and the 14th digit
            does not match
        INVALID_BIRTH_DATE: Unsupported century digit or impossible calendar date
        INVALID_GOVERNORATE_CODE: Governorate code outside the known set
    """

    INVALID_FORMAT = "invalid_format"
    INVALID_CHECKSUM = "invalid_checksum"
    INVALID_BIRTH_DATE = "invalid_birth_date"
    INVALID_GOVERNORATE_CODE = "invalid_governorate_code"


_DEFAULT_MESSAGES = {
    NationalIdErrorKind.INVALID_FORMAT: (
        "National ID must be exactly 14 digits long and contain digits only."
    ),
    NationalIdErrorKind.INVALID_CHECKSUM: (
        "National ID checksum validation failed. The ID may be invalid or corrupted."
    ),
    NationalIdErrorKind.INVALID_BIRTH_DATE: (
        "Invalid birth date extracted from National ID."
    ),
    NationalIdErrorKind.INVALID_GOVERNORATE_CODE: (
        "Unknown governorate code in National ID."
    ),
}


class InvalidNationalIdError(ValidationError):
    """Raised when a string cannot be parsed as an Egyptian national ID.

    The rejection reason is carried in ``kind`` rather than in the class, so a
    single ``except InvalidNationalIdError`` handles every failure. The
    per-kind subclasses below exist for callers that prefer to catch one
    reason only.

    Attributes:
        kind: Which validation step failed
        governorate_code: Offending two-digit code (governorate failures only)

    Example:
        >>> try:
        ...     NationalId("30101019912345")
        ... except InvalidNationalIdError as e:
        ...     e.kind, e.governorate_code
        (<NationalIdErrorKind.INVALID_GOVERNORATE_CODE: ...>, '99')
    """

    def __init__(
        self,
        kind: NationalIdErrorKind,
        message: Optional[str] = None,
        governorate_code: Optional[str] = None,
    ) -> None:
        self.kind = kind
        self.governorate_code = governorate_code
        if message is None:
            message = _DEFAULT_MESSAGES[kind]
            if governorate_code is not None:
                message = f"{message} Code: {governorate_code}"
        super().__init__(message)


class InvalidFormatError(InvalidNationalIdError):
    """Raised when the input is not exactly 14 ASCII digits."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(NationalIdErrorKind.INVALID_FORMAT, message)


class InvalidChecksumError(InvalidNationalIdError):
    """Raised when checksum enforcement is on and the 14th digit mismatches."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(NationalIdErrorKind.INVALID_CHECKSUM, message)


class InvalidBirthDateError(InvalidNationalIdError):
    """Raised for an unsupported century digit or an impossible birth date."""

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(NationalIdErrorKind.INVALID_BIRTH_DATE, message)


class InvalidGovernorateCodeError(InvalidNationalIdError):
    """Raised when the governorate code is not a known governorate."""

    def __init__(self, governorate_code: str, message: Optional[str] = None) -> None:
        super().__init__(
            NationalIdErrorKind.INVALID_GOVERNORATE_CODE,
            message,
            governorate_code=governorate_code,
        )
