"""Shared pytest fixtures for the world-status test suite."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from src.interfaces.page_fetcher import IPageFetcher
from src.models.world import Availability, Population, RecordGroup, Region, WorldRecord

# ---------------------------------------------------------------------------
# Sample pages
# ---------------------------------------------------------------------------

# Older markup: one container per data center, h3 header, explicit
# name/status spans per world.
LEGACY_STATUS_HTML = """
<html>
  <body>
    <div class="worldstatus__datacenter">
      <h3>Aether</h3>
      <ul>
        <li>
          <span class="worldstatus__world-name">Adamantoise</span>
          <span class="worldstatus__status">Standard</span>
        </li>
        <li>
          <span class="worldstatus__world-name">Cactuar</span>
          <span class="worldstatus__status">Congested</span>
        </li>
      </ul>
    </div>
    <div class="worldstatus__datacenter">
      <h3>Chaos</h3>
      <ul>
        <li>
          <span class="worldstatus__world-name">Cerberus</span>
          <span class="worldstatus__status">Preferred</span>
        </li>
      </ul>
    </div>
  </body>
</html>
"""

# Current markup: world-dcgroup containers, status icon tooltips, a
# category column and a character-creation marker.
CURRENT_STATUS_HTML = """
<html>
  <body>
    <ul class="world-dcgroup">
      <li class="world-dcgroup__item">
        <h2 class="world-dcgroup__header">Light</h2>
        <ul>
          <li class="item-list">
            <div class="world-list__status_icon"><i data-tooltip="Online"></i></div>
            <div class="world-list__world_name"><p>Lich</p></div>
            <div class="world-list__world_category"><p>Preferred+</p></div>
            <div class="world-list__create_character">
              <i data-tooltip="Creation of New Characters Available"></i>
            </div>
          </li>
          <li class="item-list">
            <div class="world-list__status_icon"><i data-tooltip="Online"></i></div>
            <div class="world-list__world_name"><p>Twintania</p></div>
            <div class="world-list__world_category"><p>Standard</p></div>
            <div class="world-list__create_character">
              <i data-tooltip="Creation of New Characters Unavailable"></i>
            </div>
          </li>
          <li class="item-list">
            <div class="world-list__status_icon"><i data-tooltip="Maintenance"></i></div>
            <div class="world-list__world_name"><p>Odin</p></div>
            <div class="world-list__world_category"><p>Standard</p></div>
          </li>
        </ul>
      </li>
      <li class="world-dcgroup__item">
        <h2 class="world-dcgroup__header">Materia</h2>
        <ul>
          <li class="item-list">
            <div class="world-list__status_icon"><i data-tooltip="Online"></i></div>
            <div class="world-list__world_name"><p>Bismarck</p></div>
            <div class="world-list__world_category"><p>New</p></div>
          </li>
        </ul>
      </li>
    </ul>
  </body>
</html>
"""

# No dedicated containers: headings followed by plain lists.
HEADING_STATUS_HTML = """
<html>
  <body>
    <div>
      <h3>Aether</h3>
      <ul>
        <li>Adamantoise Standard</li>
        <li>Cactuar Congested</li>
        <li>Faerie Preferred</li>
      </ul>
    </div>
    <div>
      <h3>Crystal</h3>
      <ul>
        <li>Balmung Standard</li>
        <li>Brynhildr Preferred+</li>
      </ul>
    </div>
  </body>
</html>
"""


@pytest.fixture
def legacy_html() -> str:
    return LEGACY_STATUS_HTML


@pytest.fixture
def current_html() -> str:
    return CURRENT_STATUS_HTML


@pytest.fixture
def heading_html() -> str:
    return HEADING_STATUS_HTML


# ---------------------------------------------------------------------------
# Time and collaborators
# ---------------------------------------------------------------------------


class FakeClock:
    """Manually advanced monotonic clock, in seconds."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def mock_fetcher() -> AsyncMock:
    """An IPageFetcher whose fetch_text returns the legacy sample page."""
    fetcher = AsyncMock(spec=IPageFetcher)
    fetcher.fetch_text.return_value = LEGACY_STATUS_HTML
    fetcher.get_provider_name.return_value = "mock"
    return fetcher


@pytest.fixture
def sample_groups() -> tuple[RecordGroup, ...]:
    """Pre-built records matching LEGACY_STATUS_HTML."""
    return (
        RecordGroup(
            name="Aether",
            region=Region.NA,
            members=(
                WorldRecord(name="Adamantoise"),
                WorldRecord(
                    name="Cactuar",
                    population=Population.CONGESTED,
                    character_creation_open=False,
                ),
            ),
        ),
        RecordGroup(
            name="Chaos",
            region=Region.EU,
            members=(
                WorldRecord(
                    name="Cerberus",
                    availability=Availability.ONLINE,
                    population=Population.PREFERRED,
                ),
            ),
        ),
    )
