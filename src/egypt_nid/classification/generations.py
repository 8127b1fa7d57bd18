"""Birth year to generational cohort classification.

Cohort boundaries follow the common Western definitions. Birth years earlier
than the first cohort clamp to the Silent Generation rather than failing.
"""

from datetime import date
from typing import Optional

from egypt_nid.models.enums import Generation


# Last birth year of each cohort; Generation Alpha is open-ended.
_UPPER_BOUNDS: list[tuple[int, Generation]] = [
    (1945, Generation.SILENT_GENERATION),
    (1964, Generation.BABY_BOOMERS),
    (1980, Generation.GENERATION_X),
    (1996, Generation.MILLENNIALS),
    (2012, Generation.GENERATION_Z),
]

SILENT_GENERATION_START_YEAR = 1928
GENERATION_ALPHA_START_YEAR = 2013

DIGITAL_NATIVE_GENERATIONS = frozenset(
    {
        Generation.MILLENNIALS,
        Generation.GENERATION_Z,
        Generation.GENERATION_ALPHA,
    }
)


def year_to_generation(birth_year: int) -> Generation:
    """Determine the generation for a birth year.

    Args:
        birth_year: Four-digit Gregorian birth year

    Returns:
        Generation whose year range contains birth_year. Years before 1928
        return SILENT_GENERATION, the earliest defined cohort.

    Example:
        >>> year_to_generation(1990)
        <Generation.MILLENNIALS: 4>
    """
    for last_year, generation in _UPPER_BOUNDS:
        if birth_year <= last_year:
            return generation
    return Generation.GENERATION_ALPHA


def is_digital_native(generation: Generation) -> bool:
    """Check if generation grew up with the internet (Millennials and younger)."""
    return generation in DIGITAL_NATIVE_GENERATIONS


def generation_year_range(
    generation: Generation, today: Optional[date] = None
) -> tuple[int, int]:
    """Get the inclusive birth year range of a generation.

    Args:
        generation: Generation to look up
        today: Reference date closing the Generation Alpha range. Defaults to
            the current date.

    Returns:
        Tuple of (start_year, end_year)

    Raises:
        ValueError: If generation is not a Generation member
    """
    if generation is Generation.SILENT_GENERATION:
        return SILENT_GENERATION_START_YEAR, _UPPER_BOUNDS[0][0]
    if generation is Generation.GENERATION_ALPHA:
        end_year = (today or date.today()).year
        return GENERATION_ALPHA_START_YEAR, end_year

    for index, (last_year, candidate) in enumerate(_UPPER_BOUNDS):
        if candidate is generation:
            return _UPPER_BOUNDS[index - 1][0] + 1, last_year

    raise ValueError(f"Unknown generation: {generation!r}")
