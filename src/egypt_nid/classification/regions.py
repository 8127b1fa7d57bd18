"""Governorate to region classification.

Every governorate maps to exactly one region. Predicates operate on regions so
they can be reused for any governorate.
"""

from egypt_nid.models.enums import Governorate, Region


GOVERNORATE_REGIONS: dict[Governorate, Region] = {
    # Greater Cairo
    Governorate.CAIRO: Region.GREATER_CAIRO,
    Governorate.GIZA: Region.GREATER_CAIRO,
    Governorate.QALYUBIA: Region.GREATER_CAIRO,
    # Delta
    Governorate.ALEXANDRIA: Region.DELTA,
    Governorate.DAMIETTA: Region.DELTA,
    Governorate.DAKAHLIA: Region.DELTA,
    Governorate.SHARQIA: Region.DELTA,
    Governorate.KAFR_EL_SHEIKH: Region.DELTA,
    Governorate.GHARBIA: Region.DELTA,
    Governorate.MONUFIA: Region.DELTA,
    Governorate.BEHEIRA: Region.DELTA,
    # Suez Canal
    Governorate.PORT_SAID: Region.CANAL,
    Governorate.SUEZ: Region.CANAL,
    Governorate.ISMAILIA: Region.CANAL,
    # Upper Egypt
    Governorate.BENI_SUEF: Region.UPPER_EGYPT,
    Governorate.FAYOUM: Region.UPPER_EGYPT,
    Governorate.MINYA: Region.UPPER_EGYPT,
    Governorate.ASYUT: Region.UPPER_EGYPT,
    Governorate.SOHAG: Region.UPPER_EGYPT,
    Governorate.QENA: Region.UPPER_EGYPT,
    Governorate.ASWAN: Region.UPPER_EGYPT,
    Governorate.LUXOR: Region.UPPER_EGYPT,
    # Sinai & Red Sea
    Governorate.RED_SEA: Region.SINAI_AND_RED_SEA,
    Governorate.NORTH_SINAI: Region.SINAI_AND_RED_SEA,
    Governorate.SOUTH_SINAI: Region.SINAI_AND_RED_SEA,
    # Western Desert
    Governorate.NEW_VALLEY: Region.WESTERN_DESERT,
    Governorate.MATROUH: Region.WESTERN_DESERT,
    # Born abroad
    Governorate.FOREIGN: Region.FOREIGN,
}

LOWER_EGYPT_REGIONS = frozenset({Region.GREATER_CAIRO, Region.DELTA})

# Mediterranean or Red Sea coastline
COASTAL_REGIONS = frozenset(
    {
        Region.DELTA,
        Region.CANAL,
        Region.SINAI_AND_RED_SEA,
        Region.WESTERN_DESERT,
    }
)


def governorate_to_region(governorate: Governorate) -> Region:
    """Get the geographic region containing a governorate.

    Args:
        governorate: Governorate decoded from a national ID

    Returns:
        Region the governorate belongs to

    Raises:
        KeyError: If governorate is not a known Governorate member
    """
    try:
        return GOVERNORATE_REGIONS[governorate]
    except KeyError:
        raise KeyError(f"Unknown governorate: {governorate!r}") from None


def is_upper_egypt(region: Region) -> bool:
    """Check if region is Upper Egypt (the Sa'id)."""
    return region is Region.UPPER_EGYPT


def is_lower_egypt(region: Region) -> bool:
    """Check if region is in Lower Egypt (Greater Cairo or the Delta)."""
    return region in LOWER_EGYPT_REGIONS


def is_coastal(region: Region) -> bool:
    """Check if region has a Mediterranean or Red Sea coastline."""
    return region in COASTAL_REGIONS
