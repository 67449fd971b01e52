"""Page fetcher backed by ``httpx.AsyncClient``.

Maps httpx failures onto the library's transport errors: non-2xx responses
become :class:`UpstreamStatusError` (with the status code), everything else
becomes :class:`TransportError`.  No retries happen here.
"""

from __future__ import annotations

import httpx

from src.config.settings import DEFAULT_HTTP_TIMEOUT_SECONDS, DEFAULT_USER_AGENT
from src.interfaces.page_fetcher import IPageFetcher
from src.utils.errors import TransportError, UpstreamStatusError
from src.utils.logging import get_logger

logger = get_logger(__name__)


class HttpxPageFetcher(IPageFetcher):
    """Fetches page text over HTTP.

    The ``httpx.AsyncClient`` may be injected for testability; when it is
    not, the fetcher builds one and closes it in :meth:`aclose`.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers={
                "User-Agent": user_agent,
                "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            },
            follow_redirects=True,
        )

    async def fetch_text(self, url: str) -> str:
        """GET *url* and return its body text."""
        logger.debug("fetch_started", url=url)
        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise TransportError(
                message=f"Timeout fetching {url}: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise UpstreamStatusError(
                status_code=exc.response.status_code,
                message=f"HTTP error! status: {exc.response.status_code} for {url}",
                provider_name=self.get_provider_name(),
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(
                message=f"HTTP error fetching {url}: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc

        html = response.text
        logger.info("fetch_complete", url=url, status=response.status_code, length=len(html))
        return html

    def get_provider_name(self) -> str:
        return "httpx"

    async def aclose(self) -> None:
        """Close the underlying client if this fetcher created it."""
        if self._owns_client:
            await self._client.aclose()
