"""Arabic and English display names for national ID enumerations.

Each table is total over its enumeration; ``tests/unit/test_localization.py``
guards that no member is missing.
"""

from enum import Enum
from typing import Union

from egypt_nid.models.enums import Gender, Generation, Governorate, Region


GOVERNORATE_NAMES_AR: dict[Governorate, str] = {
    Governorate.CAIRO: "القاهرة",
    Governorate.ALEXANDRIA: "الإسكندرية",
    Governorate.PORT_SAID: "بورسعيد",
    Governorate.SUEZ: "السويس",
    Governorate.DAMIETTA: "دمياط",
    Governorate.DAKAHLIA: "الدقهلية",
    Governorate.SHARQIA: "الشرقية",
    Governorate.QALYUBIA: "القليوبية",
    Governorate.KAFR_EL_SHEIKH: "كفر الشيخ",
    Governorate.GHARBIA: "الغربية",
    Governorate.MONUFIA: "المنوفية",
    Governorate.BEHEIRA: "البحيرة",
    Governorate.ISMAILIA: "الإسماعيلية",
    Governorate.GIZA: "الجيزة",
    Governorate.BENI_SUEF: "بني سويف",
    Governorate.FAYOUM: "الفيوم",
    Governorate.MINYA: "المنيا",
    Governorate.ASYUT: "أسيوط",
    Governorate.SOHAG: "سوهاج",
    Governorate.QENA: "قنا",
    Governorate.ASWAN: "أسوان",
    Governorate.LUXOR: "الأقصر",
    Governorate.RED_SEA: "البحر الأحمر",
    Governorate.NEW_VALLEY: "الوادي الجديد",
    Governorate.MATROUH: "مطروح",
    Governorate.NORTH_SINAI: "شمال سيناء",
    Governorate.SOUTH_SINAI: "جنوب سيناء",
    Governorate.FOREIGN: "خارج الجمهورية",
}

GOVERNORATE_NAMES_EN: dict[Governorate, str] = {
    Governorate.CAIRO: "Cairo",
    Governorate.ALEXANDRIA: "Alexandria",
    Governorate.PORT_SAID: "Port Said",
    Governorate.SUEZ: "Suez",
    Governorate.DAMIETTA: "Damietta",
    Governorate.DAKAHLIA: "Dakahlia",
    Governorate.SHARQIA: "Sharqia",
    Governorate.QALYUBIA: "Qalyubia",
    Governorate.KAFR_EL_SHEIKH: "Kafr El Sheikh",
    Governorate.GHARBIA: "Gharbia",
    Governorate.MONUFIA: "Monufia",
    Governorate.BEHEIRA: "Beheira",
    Governorate.ISMAILIA: "Ismailia",
    Governorate.GIZA: "Giza",
    Governorate.BENI_SUEF: "Beni Suef",
    Governorate.FAYOUM: "Fayoum",
    Governorate.MINYA: "Minya",
    Governorate.ASYUT: "Asyut",
    Governorate.SOHAG: "Sohag",
    Governorate.QENA: "Qena",
    Governorate.ASWAN: "Aswan",
    Governorate.LUXOR: "Luxor",
    Governorate.RED_SEA: "Red Sea",
    Governorate.NEW_VALLEY: "New Valley",
    Governorate.MATROUH: "Matrouh",
    Governorate.NORTH_SINAI: "North Sinai",
    Governorate.SOUTH_SINAI: "South Sinai",
    Governorate.FOREIGN: "Foreign",
}

REGION_NAMES_AR: dict[Region, str] = {
    Region.GREATER_CAIRO: "القاهرة الكبرى",
    Region.DELTA: "الدلتا",
    Region.CANAL: "قناة السويس",
    Region.UPPER_EGYPT: "الصعيد",
    Region.SINAI_AND_RED_SEA: "سيناء والبحر الأحمر",
    Region.WESTERN_DESERT: "الصحراء الغربية",
    Region.FOREIGN: "خارج الجمهورية",
}

REGION_NAMES_EN: dict[Region, str] = {
    Region.GREATER_CAIRO: "Greater Cairo",
    Region.DELTA: "Delta",
    Region.CANAL: "Canal",
    Region.UPPER_EGYPT: "Upper Egypt",
    Region.SINAI_AND_RED_SEA: "Sinai and Red Sea",
    Region.WESTERN_DESERT: "Western Desert",
    Region.FOREIGN: "Foreign",
}

GENERATION_NAMES_AR: dict[Generation, str] = {
    Generation.SILENT_GENERATION: "الجيل الصامت",
    Generation.BABY_BOOMERS: "جيل الطفرة",
    Generation.GENERATION_X: "الجيل إكس",
    Generation.MILLENNIALS: "جيل الألفية",
    Generation.GENERATION_Z: "جيل زد",
    Generation.GENERATION_ALPHA: "جيل ألفا",
}

GENERATION_NAMES_EN: dict[Generation, str] = {
    Generation.SILENT_GENERATION: "Silent Generation",
    Generation.BABY_BOOMERS: "Baby Boomers",
    Generation.GENERATION_X: "Generation X",
    Generation.MILLENNIALS: "Millennials",
    Generation.GENERATION_Z: "Generation Z",
    Generation.GENERATION_ALPHA: "Generation Alpha",
}

GENDER_NAMES_AR: dict[Gender, str] = {
    Gender.MALE: "ذكر",
    Gender.FEMALE: "أنثى",
}

GENDER_NAMES_EN: dict[Gender, str] = {
    Gender.MALE: "Male",
    Gender.FEMALE: "Female",
}

NamedMember = Union[Governorate, Region, Generation, Gender]

_ARABIC_TABLES: dict[type[Enum], dict] = {
    Governorate: GOVERNORATE_NAMES_AR,
    Region: REGION_NAMES_AR,
    Generation: GENERATION_NAMES_AR,
    Gender: GENDER_NAMES_AR,
}

_ENGLISH_TABLES: dict[type[Enum], dict] = {
    Governorate: GOVERNORATE_NAMES_EN,
    Region: REGION_NAMES_EN,
    Generation: GENERATION_NAMES_EN,
    Gender: GENDER_NAMES_EN,
}


def _lookup(tables: dict[type[Enum], dict], member: NamedMember) -> str:
    table = tables.get(type(member))
    if table is None:
        raise TypeError(
            f"No display names for {type(member).__name__}. "
            f"Must be one of: {', '.join(t.__name__ for t in tables)}"
        )
    return table[member]


def arabic_name(member: NamedMember) -> str:
    """Get the Arabic display name of a governorate, region, generation or gender.

    Args:
        member: Enumeration member to name

    Returns:
        Arabic display name

    Raises:
        TypeError: If member's type has no name table

    Example:
        >>> arabic_name(Governorate.CAIRO)
        'القاهرة'
    """
    return _lookup(_ARABIC_TABLES, member)


def english_name(member: NamedMember) -> str:
    """Get the English display name of a governorate, region, generation or gender.

    Args:
        member: Enumeration member to name

    Returns:
        English display name

    Raises:
        TypeError: If member's type has no name table
    """
    return _lookup(_ENGLISH_TABLES, member)


def both_names(member: NamedMember) -> tuple[str, str]:
    """Get (arabic, english) display names of an enumeration member."""
    return arabic_name(member), english_name(member)
