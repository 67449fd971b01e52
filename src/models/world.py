"""Domain models for world status data.

Defines the enums and frozen Pydantic v2 models produced by the record
parser and served by ``StatusService``.

Key relationships:
    - RecordGroup (a data center) holds an ordered tuple of WorldRecord
    - ParsedStatus is the classifier's output, folded into a WorldRecord
    - CacheStats is the introspection snapshot returned by ``cache_stats()``

Every model is frozen and every collection is a tuple: a refresh builds an
entirely new object graph instead of patching the previous one.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator

from src.utils.text_normalizer import validate_name

# A name that has passed the allow-list.  Construction of any model holding
# one fails with a ValidationError when the raw value is rejected.
ValidatedName = Annotated[str, AfterValidator(validate_name)]


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Availability(str, Enum):  # noqa: UP042 (StrEnum requires Python 3.11+)
    """Whether a world can currently be played on."""

    ONLINE = "online"
    OFFLINE = "offline"
    MAINTENANCE = "maintenance"


class Population(str, Enum):  # noqa: UP042
    """Congestion / preference tier of a world.

    ``UNKNOWN`` is never produced by the classifier; it exists for callers
    that build records from sources without a population label.
    """

    STANDARD = "standard"
    PREFERRED = "preferred"
    PREFERRED_PLUS = "preferred+"
    CONGESTED = "congested"
    NEW = "new"
    UNKNOWN = "unknown"


class Region(str, Enum):  # noqa: UP042
    """Geographic grouping of data centers."""

    NA = "na"   # North America
    EU = "eu"   # Europe
    JP = "jp"   # Japan
    OC = "oc"   # Oceania


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

class ParsedStatus(BaseModel):
    """Canonical reading of a free-form status label."""

    model_config = ConfigDict(frozen=True)

    availability: Availability = Availability.ONLINE
    population: Population = Population.STANDARD
    character_creation_open: bool = True


class WorldRecord(BaseModel):
    """One world (server instance) and its current status.

    A congested world never accepts new characters: constructing one with
    ``population=CONGESTED`` always yields ``character_creation_open=False``.
    """

    model_config = ConfigDict(frozen=True)

    name: ValidatedName
    availability: Availability = Availability.ONLINE
    population: Population = Population.STANDARD
    character_creation_open: bool = True

    @model_validator(mode="before")
    @classmethod
    def _congested_closes_creation(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("population") == Population.CONGESTED:
            return {**data, "character_creation_open": False}
        return data

    @classmethod
    def from_status(cls, name: str, status: ParsedStatus) -> WorldRecord:
        """Build a record from a raw *name* and a classifier result."""
        return cls(name=name, **status.model_dump())


class RecordGroup(BaseModel):
    """A named data center and the worlds listed under it, in page order."""

    model_config = ConfigDict(frozen=True)

    name: ValidatedName
    region: Region
    members: tuple[WorldRecord, ...] = ()


class CacheStats(BaseModel):
    """Point-in-time snapshot of a TTL cache cell.

    Durations are in milliseconds; ``age_ms`` and ``time_to_expiry_ms`` are
    ``None`` while the cell holds no data.
    """

    model_config = ConfigDict(frozen=True)

    has_data: bool
    is_fresh: bool
    age_ms: float | None = Field(default=None, ge=0)
    time_to_expiry_ms: float | None = Field(default=None, ge=0)
    ttl_ms: float = Field(gt=0)
