"""Static domain knowledge about the game's data-center topology.

# ─── PURPOSE ───────────────────────────────────────────────────────────
#
# The status page lists data centers by name only; it never says which
# region a data center belongs to.  This module holds the hand-maintained
# membership lists that map a data center name onto a ``Region``.
#
# The upstream list changes over time (new data centers open, old ones are
# merged).  Unknown names resolve to ``DEFAULT_REGION`` instead of failing,
# so a newly opened data center is still servable before this table is
# updated.
#
# All functions are pure.  Lookups are O(1) against a dict built once at
# module-load time.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from src.models.world import Region

REGION_DATA_CENTERS: dict[Region, frozenset[str]] = {
    Region.NA: frozenset({"aether", "crystal", "dynamis", "primal"}),
    Region.EU: frozenset({"chaos", "light"}),
    Region.JP: frozenset({"elemental", "gaia", "mana", "meteor"}),
    Region.OC: frozenset({"materia"}),
}

DEFAULT_REGION = Region.NA

_DATA_CENTER_TO_REGION: dict[str, Region] = {
    dc_name: region
    for region, dc_names in REGION_DATA_CENTERS.items()
    for dc_name in dc_names
}


def resolve_region(group_name: str) -> Region:
    """Return the region for data center *group_name* (case-insensitive).

    Unmatched names resolve to ``DEFAULT_REGION``; this never raises.
    """
    return _DATA_CENTER_TO_REGION.get(group_name.strip().lower(), DEFAULT_REGION)


def data_centers_in(region: Region) -> frozenset[str]:
    """Return the known (lower-cased) data center names for *region*."""
    return REGION_DATA_CENTERS.get(region, frozenset())
