"""Localization module.

This module provides Arabic and English display names for governorates,
regions, generations and genders.
"""

from egypt_nid.localization.names import arabic_name, both_names, english_name

__all__ = [
    "arabic_name",
    "both_names",
    "english_name",
]
