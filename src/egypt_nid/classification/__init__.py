"""Classification module.

This module provides static lookup tables and predicates used to enrich a
decoded national ID with region and generation information.
"""

from egypt_nid.classification.generations import (
    generation_year_range,
    is_digital_native,
    year_to_generation,
)
from egypt_nid.classification.regions import (
    governorate_to_region,
    is_coastal,
    is_lower_egypt,
    is_upper_egypt,
)

__all__ = [
    "generation_year_range",
    "governorate_to_region",
    "is_coastal",
    "is_digital_native",
    "is_lower_egypt",
    "is_upper_egypt",
    "year_to_generation",
]
