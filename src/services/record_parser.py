"""Turns the world-status page into data center / world records.

Two independent strategies are tried in order:

1. **Structured** -- the page exposes one container per data center with a
   header, a list of worlds, and dedicated name/status elements per world.
   Which CSS classes mark those pieces has changed between site revisions,
   so the strategy walks an ordered tuple of :class:`SelectorProfile`
   objects and uses the first whose container selector matches.  When no
   profile matches, the strategy reports *not applicable* rather than an
   empty result.

2. **Headings** -- a heuristic for markup without the dedicated classes:
   every heading is a candidate data center name, paired with the next
   sibling list; each list item must read ``"<World> <Population>"``.

``RecordParser.parse`` runs the structured strategy and only falls back to
the heading strategy on *not applicable*.  Neither strategy raises for any
input: incomplete groups, incomplete worlds, and names that fail validation
are skipped one at a time.  Whether an empty result is an error is decided
by the caller.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from bs4 import BeautifulSoup, Tag
from pydantic import ValidationError

from src.config.domain_knowledge import resolve_region
from src.models.world import RecordGroup, WorldRecord
from src.services.status_classifier import classify_status
from src.utils.logging import get_logger
from src.utils.text_normalizer import normalize_name

logger = get_logger(__name__)

STRUCTURED_STRATEGY = "structured"
HEADINGS_STRATEGY = "headings"

_HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
_LIST_TAGS = ["ul", "ol"]
_WORLD_ROW_RE = re.compile(
    r"^([A-Za-z\s]+?)\s+(standard|preferred\+|preferred|congested|new)$",
    re.IGNORECASE,
)
_CREATION_CLOSED_TOKENS = ("unavailable", "closed", "restricted")


@dataclass(frozen=True)
class SelectorProfile:
    """CSS selectors describing one revision of the structured markup.

    Attributes
    ----------
    name:
        Short label used in log output.
    container:
        Matches one element per data center.
    header:
        Element inside a container holding the data center name.
    member_list:
        Element inside a container holding the worlds.
    member:
        One world row inside ``member_list``.
    world_name:
        Element inside a row holding the world name.
    status:
        Selectors inside a row whose labels are joined into the status
        label handed to the classifier.  At least one must match.
    character_creation:
        Optional marker inside a row; a label such as "Creation of New
        Characters Unavailable" explicitly closes character creation.
    """

    name: str
    container: str
    header: str
    member_list: str
    member: str
    world_name: str
    status: tuple[str, ...]
    character_creation: str | None = None


CURRENT_PROFILE = SelectorProfile(
    name="world-dcgroup",
    container=".world-dcgroup__item",
    header=".world-dcgroup__header",
    member_list="ul",
    member="li.item-list",
    world_name=".world-list__world_name",
    status=(".world-list__status_icon i", ".world-list__world_category"),
    character_creation=".world-list__create_character i",
)

LEGACY_PROFILE = SelectorProfile(
    name="worldstatus",
    container=".worldstatus__datacenter",
    header="h3",
    member_list="ul",
    member="li",
    world_name=".worldstatus__world-name",
    status=(".worldstatus__status",),
)

DEFAULT_PROFILES: tuple[SelectorProfile, ...] = (CURRENT_PROFILE, LEGACY_PROFILE)


@dataclass(frozen=True)
class ParseOutcome:
    """Result of one strategy run.

    ``applicable`` is ``False`` only when the strategy's structural
    preconditions were not met; an applicable outcome may still hold zero
    groups.
    """

    strategy: str
    applicable: bool
    groups: tuple[RecordGroup, ...] = ()

    @classmethod
    def not_applicable(cls, strategy: str) -> ParseOutcome:
        return cls(strategy=strategy, applicable=False)


def _clean_text(element: Tag) -> str:
    """Return the element's text with whitespace runs collapsed."""
    return " ".join(element.get_text(" ").split())


def _element_label(element: Tag) -> str:
    """Return visible text, falling back to tooltip-style attributes for icons."""
    text = _clean_text(element)
    if text:
        return text
    for attr in ("data-tooltip", "title", "aria-label"):
        value = element.get(attr)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return ""


class RecordParser:
    """Parses world-status HTML into a tuple of :class:`RecordGroup`.

    Parameters
    ----------
    profiles:
        Structured-markup selector profiles, tried in order.
    features:
        BeautifulSoup tree builder.  ``html.parser`` needs no extra install.
    """

    def __init__(
        self,
        profiles: Sequence[SelectorProfile] = DEFAULT_PROFILES,
        features: str = "html.parser",
    ) -> None:
        self._profiles = tuple(profiles)
        self._features = features

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, page_text: str) -> tuple[RecordGroup, ...]:
        """Parse *page_text*, falling back to the heading strategy when needed."""
        return self.parse_outcome(page_text).groups

    def parse_outcome(self, page_text: str) -> ParseOutcome:
        """Like :meth:`parse` but also reports which strategy produced the groups."""
        soup = self._soup(page_text)
        outcome = self.parse_structured(soup)
        if not outcome.applicable:
            logger.info("structured_parse_not_applicable", fallback=HEADINGS_STRATEGY)
            outcome = self.parse_headings(soup)
        logger.info(
            "world_status_parsed",
            strategy=outcome.strategy,
            group_count=len(outcome.groups),
            world_count=sum(len(group.members) for group in outcome.groups),
        )
        return outcome

    def parse_structured(self, page: str | BeautifulSoup) -> ParseOutcome:
        """Primary strategy: dedicated data center containers."""
        soup = self._soup(page)

        for profile in self._profiles:
            containers = soup.select(profile.container)
            if not containers:
                continue

            logger.debug(
                "structured_profile_matched",
                profile=profile.name,
                container_count=len(containers),
            )
            groups: list[RecordGroup] = []
            seen: set[str] = set()
            for container in containers:
                group = self._parse_container(container, profile)
                if group is None:
                    continue
                key = normalize_name(group.name)
                if key in seen:
                    logger.debug("duplicate_group_skipped", group=group.name)
                    continue
                seen.add(key)
                groups.append(group)
            return ParseOutcome(strategy=STRUCTURED_STRATEGY, applicable=True, groups=tuple(groups))

        return ParseOutcome.not_applicable(STRUCTURED_STRATEGY)

    def parse_headings(self, page: str | BeautifulSoup) -> ParseOutcome:
        """Fallback strategy: headings paired with the list that follows them."""
        soup = self._soup(page)
        groups: list[RecordGroup] = []
        seen: set[str] = set()

        for heading in soup.find_all(_HEADING_TAGS):
            group_name = _clean_text(heading)
            key = normalize_name(group_name)
            if not key:
                continue
            if key in seen:
                logger.debug("duplicate_group_skipped", group=group_name)
                continue

            list_element = heading.find_next_sibling(_LIST_TAGS)
            if list_element is None:
                continue

            members: list[WorldRecord] = []
            for item in list_element.find_all("li"):
                match = _WORLD_ROW_RE.match(_clean_text(item))
                if match is None:
                    continue
                world = self._build_world(match.group(1).strip(), match.group(2))
                if world is not None:
                    members.append(world)

            if not members:
                continue

            group = self._build_group(group_name, members)
            if group is None:
                continue
            seen.add(key)
            groups.append(group)

        return ParseOutcome(strategy=HEADINGS_STRATEGY, applicable=True, groups=tuple(groups))

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _soup(self, page: str | BeautifulSoup) -> BeautifulSoup:
        if isinstance(page, BeautifulSoup):
            return page
        return BeautifulSoup(page or "", self._features)

    def _parse_container(self, container: Tag, profile: SelectorProfile) -> RecordGroup | None:
        header = container.select_one(profile.header)
        if header is None or not _clean_text(header):
            logger.debug("group_header_missing", profile=profile.name)
            return None
        group_name = _clean_text(header)

        member_list = container.select_one(profile.member_list)
        if member_list is None:
            logger.debug("group_member_list_missing", group=group_name)
            return None

        members: list[WorldRecord] = []
        for row in member_list.select(profile.member):
            world = self._parse_row(row, profile)
            if world is not None:
                members.append(world)

        if not members:
            logger.debug("group_without_worlds_dropped", group=group_name)
            return None
        return self._build_group(group_name, members)

    def _parse_row(self, row: Tag, profile: SelectorProfile) -> WorldRecord | None:
        name_element = row.select_one(profile.world_name)
        status_elements: list[Tag] = []
        for selector in profile.status:
            element = row.select_one(selector)
            if element is not None:
                status_elements.append(element)
        if name_element is None or not status_elements:
            return None

        label = " ".join(_element_label(element) for element in status_elements)
        world = self._build_world(_clean_text(name_element), label)
        if world is None or profile.character_creation is None:
            return world

        marker = row.select_one(profile.character_creation)
        if marker is not None:
            marker_label = _element_label(marker).lower()
            if any(token in marker_label for token in _CREATION_CLOSED_TOKENS):
                world = world.model_copy(update={"character_creation_open": False})
        return world

    @staticmethod
    def _build_world(name: str, status_label: str) -> WorldRecord | None:
        try:
            return WorldRecord.from_status(name, classify_status(status_label))
        except ValidationError as exc:
            logger.debug("world_name_rejected", name=name, error=str(exc))
            return None

    @staticmethod
    def _build_group(name: str, members: list[WorldRecord]) -> RecordGroup | None:
        try:
            return RecordGroup(name=name, region=resolve_region(name), members=tuple(members))
        except ValidationError as exc:
            logger.debug("group_name_rejected", name=name, error=str(exc))
            return None
