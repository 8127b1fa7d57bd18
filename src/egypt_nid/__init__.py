"""egypt-nid: parse, validate and analyze Egyptian 14-digit national IDs."""

__version__ = "0.1.0"

from egypt_nid.checksum import is_valid_format, validate_checksum
from egypt_nid.models import Gender, Generation, Governorate, Region
from egypt_nid.national_id import NationalId, ParseResult, is_valid, try_create
from egypt_nid.utils.exceptions import (
    ConfigurationError,
    EgyptNidError,
    InvalidBirthDateError,
    InvalidChecksumError,
    InvalidFormatError,
    InvalidGovernorateCodeError,
    InvalidNationalIdError,
    NationalIdErrorKind,
    ValidationError,
)

__all__ = [
    "__version__",
    "NationalId",
    "ParseResult",
    "try_create",
    "is_valid",
    "is_valid_format",
    "validate_checksum",
    "Gender",
    "Generation",
    "Governorate",
    "Region",
    "EgyptNidError",
    "ValidationError",
    "ConfigurationError",
    "InvalidNationalIdError",
    "NationalIdErrorKind",
    "InvalidFormatError",
    "InvalidChecksumError",
    "InvalidBirthDateError",
    "InvalidGovernorateCodeError",
]
