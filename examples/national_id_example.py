"""National ID parsing examples.

This module demonstrates how to decode a national ID, handle each rejection
reason, and render IDs for display.
"""

import logging

from egypt_nid import NationalId, NationalIdErrorKind, try_create
from egypt_nid.formatting import format_national_id
from egypt_nid.utils.exceptions import InvalidNationalIdError

# Configure logging to see parse failures
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def example_1_decode():
    """Example 1: Decode every field encoded in an ID."""
    print("=" * 80)
    print("EXAMPLE 1: Decoding a National ID")
    print("=" * 80)
    print()

    nid = NationalId("30101010123458")

    print(f"  Birth date:   {nid.birth_date} (age {nid.age})")
    print(f"  Gender:       {nid.gender_en} / {nid.gender_ar}")
    print(f"  Governorate:  {nid.governorate_name_en} / {nid.governorate_name_ar}")
    print(f"  Region:       {nid.region_name_en}")
    print(f"  Generation:   {nid.generation_name_en}")
    print(f"  Serial:       {nid.serial_number:04d}")
    print(f"  Card expiry:  {nid.estimated_expiry_date} (estimated)")
    print()


def example_2_rejections():
    """Example 2: Branch on the rejection reason.

    Every failure is an InvalidNationalIdError; ``kind`` says which check
    failed.
    """
    print("=" * 80)
    print("EXAMPLE 2: Handling Invalid IDs")
    print("=" * 80)
    print()

    candidates = [
        "3010101012345",    # 13 digits
        "30101011234568",   # check digit mismatch
        "30102300123458",   # February 30
        "30101019912345",   # governorate 99
    ]

    for value in candidates:
        try:
            NationalId(value, validate_checksum=True)
        except InvalidNationalIdError as e:
            if e.kind is NationalIdErrorKind.INVALID_GOVERNORATE_CODE:
                print(f"  {value}: unknown governorate {e.governorate_code}")
            else:
                print(f"  {value}: {e.kind.value} - {e}")
    print()


def example_3_try_create():
    """Example 3: Parse without exceptions."""
    print("=" * 80)
    print("EXAMPLE 3: Non-throwing Parse")
    print("=" * 80)
    print()

    for value in ["30101011234565", "not-an-id"]:
        result = try_create(value)
        if result:
            print(f"  {value}: {result.national_id.governorate_name_en}")
        else:
            print(f"  {value}: rejected ({result.error.kind.value})")
    print()


def example_4_formatting():
    """Example 4: Display formats."""
    print("=" * 80)
    print("EXAMPLE 4: Display Formats")
    print("=" * 80)
    print()

    nid = NationalId("30101010123458")
    for style in ("dashes", "spaces", "brackets", "masked"):
        print(f"  {style:<9} {format_national_id(nid, style)}")
    print()
    print(format_national_id(nid, "detailed"))
    print()


if __name__ == "__main__":
    try:
        example_1_decode()
        example_2_rejections()
        example_3_try_create()
        example_4_formatting()
    except Exception as e:
        logger.error(f"Example execution failed: {e}", exc_info=True)

    print("=" * 80)
    print("Examples completed")
    print("=" * 80)
