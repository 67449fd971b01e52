"""Lookup service over the world-status page.

``StatusService`` composes the page fetcher, the record parser and a
:class:`TtlCache` into the public query surface: exact world / data center
lookup, region filtering, flattening, and cache control.

Lifecycle of a query::

    find_world("Excalibur")
      └─ refresh()
           ├─ cache fresh?  → return cached groups (same tuple every time)
           └─ cache miss    → one shared fetch+parse task per instance
                                ├─ success → cache.write(groups) → groups
                                └─ failure → StatusUnavailableError, cache untouched

Concurrent callers that miss the cache at the same time await the same
in-flight task, so a burst of lookups costs one request to the origin.  The
task is shielded: a caller that gives up does not cancel the fetch, and a
fetch that completes still populates the cache for the next caller.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable

from src.config.settings import DEFAULT_CACHE_TTL_SECONDS, DEFAULT_WORLD_STATUS_URL
from src.interfaces.page_fetcher import IPageFetcher
from src.models.world import CacheStats, RecordGroup, Region, WorldRecord
from src.providers.cache.ttl_cache import TtlCache
from src.providers.fetch.httpx_fetcher import HttpxPageFetcher
from src.services.record_parser import RecordParser
from src.utils.errors import ParseError, StatusUnavailableError
from src.utils.logging import get_logger
from src.utils.text_normalizer import normalize_name

logger = get_logger(__name__)


class StatusService:
    """Cached, case-insensitive lookups against the world-status page.

    Parameters
    ----------
    fetcher:
        Page fetcher.  When omitted an :class:`HttpxPageFetcher` is created
        and closed again by :meth:`aclose`.
    url:
        The status page URL.
    cache_ttl:
        Seconds a successful parse stays fresh.  Must be positive.
    parser:
        Record parser; defaults to the stock selector profiles.
    clock:
        Monotonic time source for the cache, injected in tests.
    owns_fetcher:
        Whether :meth:`aclose` closes the fetcher.  Defaults to ``True``
        only when the service created the fetcher itself.
    """

    def __init__(
        self,
        fetcher: IPageFetcher | None = None,
        url: str = DEFAULT_WORLD_STATUS_URL,
        cache_ttl: float = DEFAULT_CACHE_TTL_SECONDS,
        parser: RecordParser | None = None,
        clock: Callable[[], float] = time.monotonic,
        owns_fetcher: bool | None = None,
    ) -> None:
        self._cache: TtlCache[tuple[RecordGroup, ...]] = TtlCache(cache_ttl, clock=clock)
        self._owns_fetcher = fetcher is None if owns_fetcher is None else owns_fetcher
        self._fetcher = fetcher or HttpxPageFetcher()
        self._parser = parser or RecordParser()
        self._url = url
        self._inflight: asyncio.Task[tuple[RecordGroup, ...]] | None = None

    @property
    def url(self) -> str:
        return self._url

    # ------------------------------------------------------------------
    # Refresh
    # ------------------------------------------------------------------

    async def refresh(self) -> tuple[RecordGroup, ...]:
        """Return fresh cached groups, fetching and parsing the page on a miss.

        Raises:
            StatusUnavailableError: If the fetch or the parse fails.  The
                cache keeps whatever it held before.
        """
        cached = self._cache.read()
        if cached is not None:
            return cached

        if self._inflight is None or self._inflight.done():
            self._inflight = asyncio.ensure_future(self._load())
            self._inflight.add_done_callback(self._on_load_done)
        else:
            logger.debug("world_status_refresh_coalesced", url=self._url)
        return await asyncio.shield(self._inflight)

    async def _load(self) -> tuple[RecordGroup, ...]:
        logger.info("world_status_fetch_started", url=self._url)
        try:
            page_text = await self._fetcher.fetch_text(self._url)
            outcome = self._parser.parse_outcome(page_text)
            if not outcome.groups:
                raise ParseError(
                    f"No world status data found ({outcome.strategy} strategy, "
                    f"{len(page_text)} characters)"
                )
        except Exception as exc:
            logger.warning("world_status_refresh_failed", url=self._url, error=str(exc))
            raise StatusUnavailableError(f"Failed to fetch world status: {exc}") from exc

        self._cache.write(outcome.groups)
        logger.info(
            "world_status_refreshed",
            strategy=outcome.strategy,
            group_count=len(outcome.groups),
            world_count=sum(len(group.members) for group in outcome.groups),
        )
        return outcome.groups

    def _on_load_done(self, task: asyncio.Task[tuple[RecordGroup, ...]]) -> None:
        if self._inflight is task:
            self._inflight = None
        # Mark the exception retrieved even if every waiter was cancelled.
        if not task.cancelled():
            task.exception()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def find_world(self, name: str) -> WorldRecord | None:
        """Return the first world named *name* (trimmed, case-insensitive), or ``None``."""
        wanted = normalize_name(name)
        for group in await self.refresh():
            for world in group.members:
                if normalize_name(world.name) == wanted:
                    logger.debug("world_found", world=world.name, group=group.name)
                    return world
        logger.debug("world_not_found", world=name)
        return None

    async def find_group(self, name: str) -> RecordGroup | None:
        """Return the data center named *name* (trimmed, case-insensitive), or ``None``."""
        wanted = normalize_name(name)
        for group in await self.refresh():
            if normalize_name(group.name) == wanted:
                return group
        return None

    async def list_all(self) -> tuple[RecordGroup, ...]:
        return await self.refresh()

    async def list_flat(self) -> tuple[WorldRecord, ...]:
        """All worlds of all data centers, in data center order."""
        groups = await self.refresh()
        return tuple(world for group in groups for world in group.members)

    async def list_by_region(self, region: Region | str) -> tuple[RecordGroup, ...]:
        """Data centers in *region*; an empty tuple when none match.

        Raises:
            ValueError: If *region* is a string that names no region.
        """
        wanted = region if isinstance(region, Region) else Region(region.strip().lower())
        groups = await self.refresh()
        return tuple(group for group in groups if group.region is wanted)

    # Names used by the public lookup surface.
    check_status = find_world
    get_group = find_group

    # ------------------------------------------------------------------
    # Cache control
    # ------------------------------------------------------------------

    def clear_cache(self) -> None:
        """Forget the cached groups; the next query fetches again."""
        self._cache.invalidate()

    def cache_stats(self) -> CacheStats:
        return self._cache.stats()

    # ------------------------------------------------------------------
    # Resource management
    # ------------------------------------------------------------------

    async def aclose(self) -> None:
        """Close the fetcher if this service created it."""
        if self._owns_fetcher:
            await self._fetcher.aclose()

    async def __aenter__(self) -> StatusService:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
