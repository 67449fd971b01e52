"""Interface definitions for external collaborators.

The only external collaborator of the world-status pipeline is the page
fetcher.  ``StatusService`` depends on ``IPageFetcher`` and never on httpx
directly, so tests can inject a mock and deployments can swap transports.

    Interface       →  Concrete implementations (in src/providers/)
    ───────────────────────────────────────────────────────────────
    IPageFetcher    →  HttpxPageFetcher
"""

from src.interfaces.page_fetcher import IPageFetcher

__all__ = ["IPageFetcher"]
