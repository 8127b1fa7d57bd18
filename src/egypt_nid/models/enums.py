"""Enumerations decoded from or derived from a national ID.

Governorate values are the official two-digit codes found at positions 7-8 of
the ID. Display names live in ``egypt_nid.localization``.
"""

from enum import Enum, IntEnum


class Governorate(IntEnum):
    """Egyptian governorates keyed by their official national ID code."""

    CAIRO = 1
    ALEXANDRIA = 2
    PORT_SAID = 3
    SUEZ = 4
    DAMIETTA = 11
    DAKAHLIA = 12
    SHARQIA = 13
    QALYUBIA = 14
    KAFR_EL_SHEIKH = 15
    GHARBIA = 16
    MONUFIA = 17
    BEHEIRA = 18
    ISMAILIA = 19
    GIZA = 21
    BENI_SUEF = 22
    FAYOUM = 23
    MINYA = 24
    ASYUT = 25
    SOHAG = 26
    QENA = 27
    ASWAN = 28
    LUXOR = 29
    RED_SEA = 31
    NEW_VALLEY = 32
    MATROUH = 33
    NORTH_SINAI = 34
    SOUTH_SINAI = 35
    FOREIGN = 88  # born outside Egypt


class Region(Enum):
    """Coarse geographic grouping of governorates."""

    GREATER_CAIRO = 1
    DELTA = 2
    CANAL = 3
    UPPER_EGYPT = 4
    SINAI_AND_RED_SEA = 5
    WESTERN_DESERT = 6
    FOREIGN = 7


class Generation(Enum):
    """Generational cohort by birth year.

    Ordered oldest to youngest; see ``classification.generations`` for the
    year boundaries.
    """

    SILENT_GENERATION = 1
    BABY_BOOMERS = 2
    GENERATION_X = 3
    MILLENNIALS = 4
    GENERATION_Z = 5
    GENERATION_ALPHA = 6


class Gender(Enum):
    """Gender encoded by the parity of the 13th digit."""

    MALE = "male"
    FEMALE = "female"
