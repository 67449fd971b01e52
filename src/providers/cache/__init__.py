"""Cache providers.

TtlCache is a single-slot, process-local cell: StatusService owns one and
keeps the last successful parse in it for one TTL window.  Nothing is shared
across processes or survives a restart.
"""

from src.providers.cache.ttl_cache import TtlCache

__all__ = ["TtlCache"]
