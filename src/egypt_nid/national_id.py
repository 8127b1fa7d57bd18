"""Egyptian national ID value object.

A national ID is a 14-digit string laid out as::

    C YY MM DD GG SSSS K
    | |        |  |    +-- check digit (position 13)
    | |        |  +------- serial number (positions 9-12), last digit odd = male
    | |        +---------- governorate code (positions 7-8)
    | +------------------- birth date YYMMDD (positions 1-6)
    +--------------------- century digit: 2 = 1900s, 3 = 2000s

``NationalId`` validates and decodes the string once, on construction, and is
immutable afterwards. Everything else (age, region, generation, card
issue/expiry estimates) is derived from the decoded fields on access.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from egypt_nid import checksum
from egypt_nid.checksum import is_valid_format, validate_checksum
from egypt_nid.classification import (
    governorate_to_region,
    is_coastal,
    is_digital_native,
    is_lower_egypt,
    is_upper_egypt,
    year_to_generation,
)
from egypt_nid.localization import arabic_name, english_name
from egypt_nid.logging_audit import get_logger
from egypt_nid.models.enums import Gender, Generation, Governorate, Region
from egypt_nid.utils.exceptions import (
    InvalidBirthDateError,
    InvalidChecksumError,
    InvalidFormatError,
    InvalidGovernorateCodeError,
    InvalidNationalIdError,
)


logger = get_logger(__name__)

# Field offsets within the 14-digit string
CENTURY_DIGIT_INDEX = 0
BIRTH_DATE_SLICE = slice(1, 7)
GOVERNORATE_SLICE = slice(7, 9)
SERIAL_SLICE = slice(9, 13)
GENDER_DIGIT_INDEX = 12
CHECKSUM_DIGIT_INDEX = 13

CENTURY_BASES = {"2": 1900, "3": 2000}

ADULT_AGE = 18
FIRST_ISSUE_AGE = 16

# Cards issued before 2021 were valid for 5 years, 7 years since
VALIDITY_PERIOD_CHANGE_YEAR = 2021
LEGACY_VALIDITY_PERIOD_YEARS = 5
VALIDITY_PERIOD_YEARS = 7


def _today() -> date:
    return date.today()


def _add_years(start: date, years: int) -> date:
    """Shift a date by whole years, moving Feb 29 to Feb 28 in non-leap years."""
    try:
        return start.replace(year=start.year + years)
    except ValueError:
        return start.replace(year=start.year + years, day=28)


def _whole_years_between(start: date, end: date) -> int:
    """Count anniversaries of start reached by end (negative if end < start)."""
    years = end.year - start.year
    if (start.month, start.day) > (end.month, end.day):
        years -= 1
    return years


class NationalId:
    """A validated 14-digit Egyptian national ID.

    Equality and hashing use the raw string only. Ordering is by birth date,
    then serial number, so sorting a list puts the oldest person first.

    Attributes:
        value: The original 14-digit string, unchanged
        birth_date: Birth date decoded from the century digit and YYMMDD
        governorate: Governorate of birth registration
        governorate_code: Numeric code backing ``governorate``
        serial_number: Four-digit serial number (positions 9-12)
        gender: MALE if the 13th digit is odd, FEMALE if even

    Example:
        >>> nid = NationalId("30101010123458")
        >>> nid.birth_date, nid.governorate, nid.gender
        (datetime.date(2001, 1, 1), <Governorate.CAIRO: 1>, <Gender.MALE: 'male'>)
    """

    __slots__ = ("_value", "_birth_date", "_governorate", "_serial_number", "_gender")

    def __init__(self, value: str, validate_checksum: bool = False) -> None:
        """Validate and decode a national ID.

        Checks run in order and the first failure is raised: format, checksum
        (only when requested), birth date, governorate code.

        Args:
            value: Candidate 14-digit national ID
            validate_checksum: Whether to enforce the 14th check digit. Off by
                default because the official algorithm is not published and
                the implemented one is an approximation.

        Raises:
            InvalidFormatError: If value is not exactly 14 ASCII digits
            InvalidChecksumError: If validate_checksum is set and the check
                digit does not match
            InvalidBirthDateError: If the century digit is not 2 or 3, or the
                encoded date does not exist
            InvalidGovernorateCodeError: If the governorate code is unknown
        """
        if not is_valid_format(value):
            raise InvalidFormatError()

        if validate_checksum and not checksum.validate_checksum(value):
            raise InvalidChecksumError()

        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_birth_date", _decode_birth_date(value))
        object.__setattr__(self, "_governorate", _decode_governorate(value))
        object.__setattr__(self, "_serial_number", int(value[SERIAL_SLICE]))
        object.__setattr__(
            self,
            "_gender",
            Gender.MALE if int(value[GENDER_DIGIT_INDEX]) % 2 else Gender.FEMALE,
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._value,))

    # Factories

    @classmethod
    def try_create(cls, value: Optional[str], validate_checksum: bool = False) -> "ParseResult":
        """Parse value without raising. See :func:`try_create`."""
        return try_create(value, validate_checksum=validate_checksum)

    @staticmethod
    def is_valid(value: Optional[str], validate_checksum: bool = False) -> bool:
        """Check value against every construction rule without raising."""
        return is_valid(value, validate_checksum=validate_checksum)

    @staticmethod
    def is_valid_format(value: Optional[str]) -> bool:
        """Check value is 14 ASCII digits, ignoring domain rules."""
        return is_valid_format(value)

    @staticmethod
    def validate_checksum(value: Optional[str]) -> bool:
        """Check the weighted-sum check digit of value. Never raises."""
        return validate_checksum(value)

    # Decoded fields

    @property
    def value(self) -> str:
        return self._value

    @property
    def birth_date(self) -> date:
        return self._birth_date

    @property
    def birth_year(self) -> int:
        return self._birth_date.year

    @property
    def birth_month(self) -> int:
        return self._birth_date.month

    @property
    def birth_day(self) -> int:
        return self._birth_date.day

    @property
    def century_digit(self) -> str:
        return self._value[CENTURY_DIGIT_INDEX]

    @property
    def governorate(self) -> Governorate:
        return self._governorate

    @property
    def governorate_code(self) -> int:
        return int(self._governorate)

    @property
    def serial_number(self) -> int:
        return self._serial_number

    @property
    def gender(self) -> Gender:
        return self._gender

    @property
    def checksum_digit(self) -> int:
        return int(self._value[CHECKSUM_DIGIT_INDEX])

    @property
    def has_valid_checksum(self) -> bool:
        """Whether the check digit matches the approximated checksum."""
        return validate_checksum(self._value)

    # Age

    def age_on(self, on: date) -> int:
        """Get the age in whole years on a given date.

        The age only increases once the birthday has been reached in the year
        of ``on``. A Feb 29 birthday is reached on Mar 1 in non-leap years.
        """
        return _whole_years_between(self._birth_date, on)

    @property
    def age(self) -> int:
        return self.age_on(_today())

    def is_adult_on(self, on: date) -> bool:
        return self.age_on(on) >= ADULT_AGE

    @property
    def is_adult(self) -> bool:
        """Whether the person is 18 or older today."""
        return self.is_adult_on(_today())

    def is_eligible_for_national_id_on(self, on: date) -> bool:
        return self.age_on(on) >= FIRST_ISSUE_AGE

    @property
    def is_eligible_for_national_id(self) -> bool:
        """Whether the person is old enough (16) to hold a national ID card."""
        return self.is_eligible_for_national_id_on(_today())

    # Card issue / expiry estimates. These assume the first card was issued
    # on the 16th birthday and never renewed early; treat them as hints only.

    @property
    def estimated_issue_date(self) -> date:
        """Estimated first issue date: the 16th birthday."""
        return _add_years(self._birth_date, FIRST_ISSUE_AGE)

    @property
    def validity_period_years(self) -> int:
        if self.estimated_issue_date.year < VALIDITY_PERIOD_CHANGE_YEAR:
            return LEGACY_VALIDITY_PERIOD_YEARS
        return VALIDITY_PERIOD_YEARS

    @property
    def estimated_expiry_date(self) -> date:
        """Estimated expiry of the first card (5 years before 2021, 7 after)."""
        return _add_years(self.estimated_issue_date, self.validity_period_years)

    def years_since_issue_on(self, on: date) -> int:
        return max(0, _whole_years_between(self.estimated_issue_date, on))

    @property
    def years_since_issue(self) -> int:
        return self.years_since_issue_on(_today())

    @property
    def card_age(self) -> int:
        """Alias of ``years_since_issue``."""
        return self.years_since_issue

    def is_likely_expired_on(self, on: date) -> bool:
        return on > self.estimated_expiry_date

    @property
    def is_likely_expired(self) -> bool:
        return self.is_likely_expired_on(_today())

    def years_until_expiry_on(self, on: date) -> int:
        """Whole years from ``on`` until the estimated expiry date.

        Negative once the card is past its estimated expiry.
        """
        expiry = self.estimated_expiry_date
        if on > expiry:
            return -_whole_years_between(expiry, on)
        return _whole_years_between(on, expiry)

    @property
    def years_until_expiry(self) -> int:
        return self.years_until_expiry_on(_today())

    def is_expiring_soon_on(self, on: date) -> bool:
        return 0 <= self.years_until_expiry_on(on) <= 1

    @property
    def is_expiring_soon(self) -> bool:
        """Whether the card is estimated to expire within about a year."""
        return self.is_expiring_soon_on(_today())

    # Classification

    @property
    def region(self) -> Region:
        return governorate_to_region(self._governorate)

    @property
    def generation(self) -> Generation:
        return year_to_generation(self.birth_year)

    @property
    def is_digital_native(self) -> bool:
        return is_digital_native(self.generation)

    @property
    def is_from_upper_egypt(self) -> bool:
        return is_upper_egypt(self.region)

    @property
    def is_from_lower_egypt(self) -> bool:
        return is_lower_egypt(self.region)

    @property
    def is_from_greater_cairo(self) -> bool:
        return self.region is Region.GREATER_CAIRO

    @property
    def is_from_delta(self) -> bool:
        return self.region is Region.DELTA

    @property
    def is_from_canal(self) -> bool:
        return self.region is Region.CANAL

    @property
    def is_from_sinai(self) -> bool:
        return self.region is Region.SINAI_AND_RED_SEA

    @property
    def is_from_western_desert(self) -> bool:
        return self.region is Region.WESTERN_DESERT

    @property
    def is_from_coastal_region(self) -> bool:
        return is_coastal(self.region)

    @property
    def is_born_abroad(self) -> bool:
        return self._governorate is Governorate.FOREIGN

    # Display names

    @property
    def governorate_name_ar(self) -> str:
        return arabic_name(self._governorate)

    @property
    def governorate_name_en(self) -> str:
        return english_name(self._governorate)

    @property
    def region_name_ar(self) -> str:
        return arabic_name(self.region)

    @property
    def region_name_en(self) -> str:
        return english_name(self.region)

    @property
    def generation_name_ar(self) -> str:
        return arabic_name(self.generation)

    @property
    def generation_name_en(self) -> str:
        return english_name(self.generation)

    @property
    def gender_ar(self) -> str:
        return arabic_name(self._gender)

    @property
    def gender_en(self) -> str:
        return english_name(self._gender)

    # Equality and ordering

    def _sort_key(self) -> tuple[date, int]:
        return self._birth_date, self._serial_number

    def equals(self, other: Optional["NationalId"]) -> bool:
        """Check equality by raw value; None is never equal."""
        return isinstance(other, NationalId) and self._value == other._value

    def compare_to(self, other: Optional["NationalId"]) -> int:
        """Compare by (birth date, serial number).

        Returns:
            -1, 0 or 1. Any instance sorts after None.

        Raises:
            TypeError: If other is neither None nor a NationalId
        """
        if other is None:
            return 1
        if not isinstance(other, NationalId):
            raise TypeError(
                f"Cannot compare NationalId with {type(other).__name__}"
            )
        mine, theirs = self._sort_key(), other._sort_key()
        return (mine > theirs) - (mine < theirs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NationalId):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, NationalId):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, NationalId):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, NationalId):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, NationalId):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"NationalId({self._value!r})"

    def to_dict(self, on: Optional[date] = None) -> dict[str, Any]:
        """Export decoded and derived fields for JSON serialization.

        Args:
            on: Reference date for age and expiry fields. Defaults to today.

        Returns:
            Dictionary of JSON-compatible values
        """
        on = on or _today()
        return {
            "national_id": self._value,
            "birth_date": self._birth_date.isoformat(),
            "age": self.age_on(on),
            "is_adult": self.is_adult_on(on),
            "gender": self._gender.value,
            "gender_ar": self.gender_ar,
            "governorate_code": self.governorate_code,
            "governorate": self.governorate_name_en,
            "governorate_ar": self.governorate_name_ar,
            "region": self.region_name_en,
            "region_ar": self.region_name_ar,
            "generation": self.generation_name_en,
            "generation_ar": self.generation_name_ar,
            "is_digital_native": self.is_digital_native,
            "serial_number": self._serial_number,
            "checksum_valid": self.has_valid_checksum,
            "estimated_issue_date": self.estimated_issue_date.isoformat(),
            "estimated_expiry_date": self.estimated_expiry_date.isoformat(),
            "is_likely_expired": self.is_likely_expired_on(on),
            "years_until_expiry": self.years_until_expiry_on(on),
        }


def _decode_birth_date(value: str) -> date:
    century_base = CENTURY_BASES.get(value[CENTURY_DIGIT_INDEX])
    if century_base is None:
        raise InvalidBirthDateError(
            f"Unsupported century digit in National ID: {value[CENTURY_DIGIT_INDEX]}"
        )

    digits = value[BIRTH_DATE_SLICE]
    year = century_base + int(digits[0:2])
    month = int(digits[2:4])
    day = int(digits[4:6])
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidBirthDateError(
            f"Invalid birth date extracted from National ID: "
            f"{year:04d}-{month:02d}-{day:02d}"
        ) from e


def _decode_governorate(value: str) -> Governorate:
    code = value[GOVERNORATE_SLICE]
    try:
        return Governorate(int(code))
    except ValueError:
        raise InvalidGovernorateCodeError(code) from None


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a non-throwing parse.

    Exactly one of ``national_id`` and ``error`` is set. The result is truthy
    when parsing succeeded.

    Attributes:
        national_id: Parsed ID on success, None on failure
        error: Rejection reason on failure, None on success
    """

    national_id: Optional[NationalId] = None
    error: Optional[InvalidNationalIdError] = None

    @property
    def success(self) -> bool:
        return self.national_id is not None

    def __bool__(self) -> bool:
        return self.success


def try_create(value: Optional[str], validate_checksum: bool = False) -> ParseResult:
    """Parse a national ID without raising.

    Args:
        value: Candidate national ID, may be None
        validate_checksum: Whether to enforce the check digit (default False,
            same as the constructor)

    Returns:
        ParseResult holding the NationalId, or the error that rejected it

    Example:
        >>> result = try_create("123")
        >>> result.success, result.error.kind
        (False, <NationalIdErrorKind.INVALID_FORMAT: 'invalid_format'>)
    """
    try:
        national_id = NationalId(value, validate_checksum=validate_checksum)
    except InvalidNationalIdError as e:
        logger.debug("National ID rejected: %s", e.kind.value)
        return ParseResult(error=e)
    return ParseResult(national_id=national_id)


def is_valid(value: Optional[str], validate_checksum: bool = False) -> bool:
    """Check value against every construction rule; equivalent to ``try_create(...).success``."""
    return try_create(value, validate_checksum=validate_checksum).success
