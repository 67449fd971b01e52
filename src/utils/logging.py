"""Structured logging setup using structlog.

Log lines never go to stdout: the CLI prints its answers there, and library
callers may be printing their own.  Unless told otherwise every renderer
writes to ``sys.stderr``.

Rendering follows ``APP_ENV``: a ``ConsoleRenderer`` while developing, a
``JSONRenderer`` in production (or whenever ``json_output`` is set).  Records
from stdlib ``logging`` (httpx, httpcore) are fed through the same processor
chain, so one run produces one format.

Modules call :func:`get_logger` at import time.  The first call configures
structlog with the defaults below if nothing else has; the CLI later calls
:func:`configure_logging` again with the configured level.
"""

import logging
import os
import sys
from typing import TextIO

import structlog

from src.utils.errors import ConfigurationError

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "INFO"


def _normalize_level(log_level: str) -> str:
    level = str(log_level).strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level {log_level!r}; expected one of {', '.join(LOG_LEVELS)}"
        )
    return level


def configure_logging(
    log_level: str = DEFAULT_LOG_LEVEL,
    json_output: bool = False,
    stream: TextIO | None = None,
) -> structlog.BoundLogger:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: One of ``LOG_LEVELS``, case-insensitive.
        json_output: Force JSON lines regardless of ``APP_ENV``.
        stream: Destination for log lines.  Defaults to ``sys.stderr``.

    Returns:
        A logger from the new configuration.

    Raises:
        ConfigurationError: If *log_level* is not a known level name.
    """
    level = _normalize_level(log_level)
    use_json = json_output or os.environ.get("APP_ENV", "development") == "production"
    target = stream if stream is not None else sys.stderr

    # Everything except the final renderer; shared with the stdlib bridge.
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if use_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        # No escape codes when stderr is redirected to a file or pipe.
        renderer = structlog.dev.ConsoleRenderer(colors=target.isatty())

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=target),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )
    handler = logging.StreamHandler(target)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    return structlog.get_logger()


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structlog logger bound with *name*.

    Configures logging with the stderr defaults first when structlog has not
    been configured, so importing the library never prints to stdout.
    """
    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(logger_name=name)
