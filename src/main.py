"""Wiring for the world-status library.

Builds a ready-to-use :class:`StatusService` from :class:`Settings`: an
httpx page fetcher configured with the settings' timeout and User-Agent,
the stock record parser, and a cache with the configured TTL.
"""

from __future__ import annotations

import httpx

from src.config.settings import Settings
from src.providers.fetch.httpx_fetcher import HttpxPageFetcher
from src.services.status_service import StatusService


def build_fetcher(
    app_settings: Settings,
    http_client: httpx.AsyncClient | None = None,
) -> HttpxPageFetcher:
    """Create the httpx-backed page fetcher described by *app_settings*."""
    return HttpxPageFetcher(
        http_client=http_client,
        timeout=app_settings.http_timeout_seconds,
        user_agent=app_settings.user_agent,
    )


def build_status_service(
    app_settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> StatusService:
    """Create a :class:`StatusService` for *app_settings* (defaults from the environment).

    An injected *http_client* stays the caller's to close.  Without one the
    fetcher creates its own client and the service closes it in ``aclose()``.
    """
    app_settings = app_settings or Settings()
    return StatusService(
        fetcher=build_fetcher(app_settings, http_client),
        url=app_settings.world_status_url,
        cache_ttl=app_settings.cache_ttl_seconds,
        owns_fetcher=True,
    )
