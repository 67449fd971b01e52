"""Utility modules for the world-status library.

- **errors** -- Exception hierarchy rooted at WorldStatusError; the service
  boundary wraps transport and parse failures in StatusUnavailableError.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
- **text_normalizer** -- Name allow-list validation and the trim + casefold
  normalization used by every lookup.
"""

from src.utils.errors import (
    ConfigurationError,
    InvalidNameError,
    ParseError,
    StatusUnavailableError,
    TransportError,
    UpstreamStatusError,
    WorldStatusError,
)
from src.utils.logging import configure_logging, get_logger
from src.utils.text_normalizer import is_valid_name, normalize_name, validate_name

__all__ = [
    "ConfigurationError",
    "InvalidNameError",
    "ParseError",
    "StatusUnavailableError",
    "TransportError",
    "UpstreamStatusError",
    "WorldStatusError",
    "configure_logging",
    "get_logger",
    "is_valid_name",
    "normalize_name",
    "validate_name",
]
