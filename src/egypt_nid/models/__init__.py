"""Models module.

This module provides the enumerations decoded from national IDs.
"""

from egypt_nid.models.enums import Gender, Generation, Governorate, Region

__all__ = [
    "Gender",
    "Generation",
    "Governorate",
    "Region",
]
