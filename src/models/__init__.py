"""World-status domain models; re-exports all public model classes."""

from __future__ import annotations

from src.models.world import (
    Availability,
    CacheStats,
    ParsedStatus,
    Population,
    RecordGroup,
    Region,
    ValidatedName,
    WorldRecord,
)

__all__ = [
    "Availability",
    "CacheStats",
    "ParsedStatus",
    "Population",
    "RecordGroup",
    "Region",
    "ValidatedName",
    "WorldRecord",
]
