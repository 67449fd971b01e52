"""Maps free-form world status labels onto the canonical status model.

The status page words things loosely ("Standard", "Preferred+",
"Maintenance Preferred", tooltips like "Online").  ``classify_status`` turns
any such label into a :class:`ParsedStatus` and never raises: an unknown or
empty label reads as an online, standard world that accepts new characters,
so one odd label cannot abort a whole parse.
"""

from __future__ import annotations

from src.models.world import Availability, ParsedStatus, Population

# Checked in order; the first token contained in the label wins.  Longer
# tokens come before their prefixes ("preferred+" before "preferred").
_AVAILABILITY_TOKENS: tuple[tuple[str, Availability], ...] = (
    ("maintenance", Availability.MAINTENANCE),
    ("offline", Availability.OFFLINE),
)

_POPULATION_TOKENS: tuple[tuple[str, Population], ...] = (
    ("preferred+", Population.PREFERRED_PLUS),
    ("preferred", Population.PREFERRED),
    ("congested", Population.CONGESTED),
    ("new", Population.NEW),
)


def classify_status(label: str) -> ParsedStatus:
    """Classify a status *label* into availability, population and creation state."""
    text = (label or "").lower().strip()

    availability = next(
        (value for token, value in _AVAILABILITY_TOKENS if token in text),
        Availability.ONLINE,
    )
    population = next(
        (value for token, value in _POPULATION_TOKENS if token in text),
        Population.STANDARD,
    )

    return ParsedStatus(
        availability=availability,
        population=population,
        character_creation_open=population is not Population.CONGESTED,
    )
