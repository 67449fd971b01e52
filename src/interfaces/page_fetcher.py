"""Abstract base class for page-fetching providers.

``StatusService`` never talks HTTP itself; it asks an injected fetcher for
the text behind one URL.  Tests swap in a mock, production uses the httpx
implementation in ``src.providers.fetch``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class IPageFetcher(ABC):
    """Contract for services that retrieve raw page text from a URL."""

    @abstractmethod
    async def fetch_text(self, url: str) -> str:
        """Fetch *url* and return the response body as text.

        Parameters
        ----------
        url:
            Absolute URL of the page.

        Returns
        -------
        str
            The decoded response body.

        Raises
        ------
        src.utils.errors.UpstreamStatusError
            If the origin answers with a non-2xx status.
        src.utils.errors.TransportError
            On any other network-level failure (timeout, refused, ...).
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier for this fetcher, e.g. ``"httpx"``."""

    async def aclose(self) -> None:
        """Release any network resources held by the fetcher."""
