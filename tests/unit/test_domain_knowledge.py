"""Unit tests for src.config.domain_knowledge -- data center to region mapping."""

from __future__ import annotations

import pytest

from src.config.domain_knowledge import (
    DEFAULT_REGION,
    REGION_DATA_CENTERS,
    data_centers_in,
    resolve_region,
)
from src.models.world import Region


# ═══════════════════════════════════════════════════════════════════════════
# resolve_region
# ═══════════════════════════════════════════════════════════════════════════


class TestResolveRegion:
    """Known data centers map to their region; everything else to the default."""

    @pytest.mark.parametrize(
        ("name", "region"),
        [
            ("Aether", Region.NA),
            ("Crystal", Region.NA),
            ("Dynamis", Region.NA),
            ("Primal", Region.NA),
            ("Chaos", Region.EU),
            ("Light", Region.EU),
            ("Elemental", Region.JP),
            ("Gaia", Region.JP),
            ("Mana", Region.JP),
            ("Meteor", Region.JP),
            ("Materia", Region.OC),
        ],
    )
    def test_known_data_centers(self, name: str, region: Region) -> None:
        assert resolve_region(name) is region

    def test_case_and_whitespace_insensitive(self) -> None:
        assert resolve_region("  CHAOS ") is Region.EU
        assert resolve_region("materia") is Region.OC

    @pytest.mark.parametrize("name", ["Shadow", "", "   ", "Aether2"])
    def test_unknown_defaults_to_na(self, name: str) -> None:
        assert DEFAULT_REGION is Region.NA
        assert resolve_region(name) is DEFAULT_REGION


# ═══════════════════════════════════════════════════════════════════════════
# Membership tables
# ═══════════════════════════════════════════════════════════════════════════


class TestRegionTables:
    def test_every_region_listed(self) -> None:
        assert set(REGION_DATA_CENTERS) == set(Region)

    def test_no_data_center_in_two_regions(self) -> None:
        seen: set[str] = set()
        for names in REGION_DATA_CENTERS.values():
            assert not (seen & names)
            seen |= names

    def test_names_are_lowercase(self) -> None:
        for names in REGION_DATA_CENTERS.values():
            assert all(name == name.lower() for name in names)

    def test_data_centers_in(self) -> None:
        assert data_centers_in(Region.EU) == frozenset({"chaos", "light"})
        assert data_centers_in(Region.OC) == frozenset({"materia"})
