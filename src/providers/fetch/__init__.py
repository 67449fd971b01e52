"""Page fetchers.

HttpxPageFetcher is the default transport for StatusService.  Any object
implementing IPageFetcher can replace it without touching the service.
"""

from src.providers.fetch.httpx_fetcher import HttpxPageFetcher

__all__ = ["HttpxPageFetcher"]
