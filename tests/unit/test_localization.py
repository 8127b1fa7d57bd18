"""Unit tests for Arabic and English display names."""

import pytest

from egypt_nid.localization import arabic_name, both_names, english_name
from egypt_nid.localization.names import (
    GENDER_NAMES_AR,
    GENDER_NAMES_EN,
    GENERATION_NAMES_AR,
    GENERATION_NAMES_EN,
    GOVERNORATE_NAMES_AR,
    GOVERNORATE_NAMES_EN,
    REGION_NAMES_AR,
    REGION_NAMES_EN,
)
from egypt_nid.models import Gender, Generation, Governorate, Region


class TestNameTables:
    """Every enumeration member must have a name in both languages."""

    @pytest.mark.parametrize(
        "enum_class,table",
        [
            (Governorate, GOVERNORATE_NAMES_AR),
            (Governorate, GOVERNORATE_NAMES_EN),
            (Region, REGION_NAMES_AR),
            (Region, REGION_NAMES_EN),
            (Generation, GENERATION_NAMES_AR),
            (Generation, GENERATION_NAMES_EN),
            (Gender, GENDER_NAMES_AR),
            (Gender, GENDER_NAMES_EN),
        ],
    )
    def test_table_is_total(self, enum_class, table):
        """No member is missing and no name is blank."""
        assert set(table) == set(enum_class)
        assert all(name.strip() for name in table.values())

    @pytest.mark.parametrize(
        "table",
        [GOVERNORATE_NAMES_AR, GOVERNORATE_NAMES_EN, REGION_NAMES_EN],
    )
    def test_names_are_unique(self, table):
        """Distinct members never share a display name."""
        assert len(set(table.values())) == len(table)


class TestLookup:
    """Test suite for name lookup functions."""

    @pytest.mark.parametrize(
        "member,arabic,english",
        [
            (Governorate.CAIRO, "القاهرة", "Cairo"),
            (Governorate.KAFR_EL_SHEIKH, "كفر الشيخ", "Kafr El Sheikh"),
            (Governorate.FOREIGN, "خارج الجمهورية", "Foreign"),
            (Region.UPPER_EGYPT, "الصعيد", "Upper Egypt"),
            (Region.CANAL, "قناة السويس", "Canal"),
            (Generation.MILLENNIALS, "جيل الألفية", "Millennials"),
            (Gender.MALE, "ذكر", "Male"),
            (Gender.FEMALE, "أنثى", "Female"),
        ],
    )
    def test_names(self, member, arabic, english):
        """Lookups return the table entries."""
        assert arabic_name(member) == arabic
        assert english_name(member) == english
        assert both_names(member) == (arabic, english)

    @pytest.mark.parametrize("value", ["Cairo", 1, None])
    def test_unsupported_type_raises(self, value):
        """Only the four enumerations have names."""
        with pytest.raises(TypeError, match="No display names"):
            arabic_name(value)
        with pytest.raises(TypeError, match="No display names"):
            english_name(value)
