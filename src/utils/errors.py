"""Custom exception hierarchy for the world-status library.

All library exceptions inherit from :class:`WorldStatusError`, which carries
an optional ``provider_name`` so handlers can tell which collaborator (e.g.
"httpx", "lodestone") produced the failure.

The hierarchy follows the fetch-parse-cache pipeline:

    WorldStatusError  (base -- catch-all for any world-status error)
    +-- TransportError          (page text could not be retrieved)
    |   +-- UpstreamStatusError (origin answered with a non-2xx status)
    +-- ParseError              (no groups found by either parse strategy)
    +-- InvalidNameError        (world/group name failed the allow-list)
    +-- ConfigurationError      (startup / invalid config, e.g. bad TTL)
    +-- StatusUnavailableError  (single wrapped failure at the service boundary)

Validation failures are recovered inside the parser (the offending entity is
skipped).  Transport and parse failures reach the caller of
``StatusService`` wrapped in :class:`StatusUnavailableError`, with the
original exception chained as ``__cause__``.
"""


class WorldStatusError(Exception):
    """Base exception for all world-status errors.

    The ``__str__`` method prefixes the provider name in brackets for log
    scanning, e.g. ``[httpx] HTTP 503 for https://...``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Fetch errors
# ---------------------------------------------------------------------------

class TransportError(WorldStatusError):
    """Raised when the page fetcher cannot retrieve the status page text."""

    def __init__(
        self,
        message: str = "Failed to retrieve page text",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class UpstreamStatusError(TransportError):
    """Raised when the origin responds with a non-success HTTP status.

    Kept distinct from plain transport failures so callers can, for
    example, back off on 503 but give up on 404.
    """

    def __init__(
        self,
        status_code: int,
        message: str | None = None,
        provider_name: str | None = None,
    ) -> None:
        self._status_code = status_code
        super().__init__(
            message=message or f"HTTP error! status: {status_code}",
            provider_name=provider_name,
        )

    @property
    def status_code(self) -> int:
        return self._status_code


# ---------------------------------------------------------------------------
# Parse / validation errors
# ---------------------------------------------------------------------------

class ParseError(WorldStatusError):
    """Raised when neither parse strategy finds any world groups."""

    def __init__(
        self,
        message: str = "No world status data found in page",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class InvalidNameError(WorldStatusError, ValueError):
    """Raised when a world or group name fails the allow-list check.

    Also a ``ValueError`` so pydantic validators surface it as a regular
    ``ValidationError`` during model construction.
    """

    def __init__(
        self,
        message: str = "Invalid name",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Configuration / service boundary errors
# ---------------------------------------------------------------------------

class ConfigurationError(WorldStatusError):
    """Raised when configuration is invalid at startup (e.g. a non-positive TTL)."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class StatusUnavailableError(WorldStatusError):
    """Raised by ``StatusService`` when a refresh cycle fails.

    Wraps whatever went wrong underneath (transport or parse failure) so
    callers only need to handle one type.  The original exception is
    available as ``__cause__``.
    """

    def __init__(
        self,
        message: str = "Failed to fetch world status",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
