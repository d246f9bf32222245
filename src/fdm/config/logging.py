"""Logging for fdm: structlog events and stdlib records on one stderr handler.

Services log through :func:`get_logger` (structlog); the game loop uses a
plain ``logging.getLogger``. Both end up in the same ``ProcessorFormatter``,
so every line has a timestamp, level, and logger name, rendered either for
people (``ConsoleRenderer``) or for machines (``--log-json``).
"""

from __future__ import annotations

import logging
import sys
from typing import IO

import structlog
from structlog.types import Processor

FDM_LOGGER = "fdm"

_PRE_CHAIN: list[Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def _renderer(log_json: bool, out: IO[str]) -> list[Processor]:
    if log_json:
        return [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=out.isatty())]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: IO[str] | None = None,
) -> None:
    """Route all logging to *stream* (default: the current ``sys.stderr``).

    Safe to call repeatedly; the root handler is replaced, not stacked.
    Third-party loggers stay at WARNING. ``fdm.*`` drops to DEBUG when
    *verbose* is set.
    """
    out = stream if stream is not None else sys.stderr

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_PRE_CHAIN,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_renderer(log_json, out),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(FDM_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to *name* (use ``__name__``)."""
    return structlog.stdlib.get_logger(name)
