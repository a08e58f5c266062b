"""
Structured logging on stderr.

structlog renders both its own events and plain stdlib records, so
pytest-benchmark's table on stdout is never interleaved with log lines.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from filter_bench.config import get_config


def setup_logging(level: str | None = None, format: str | None = None) -> None:
    """
    Route all logging through one structlog formatter on stderr.

    Args:
        level: Log level name. Defaults to the configured level.
        format: ``plain`` or ``json``. Defaults to the configured format.
    """
    if level is None or format is None:
        settings = get_config().logging
        level = level or settings.level
        format = format or settings.format

    pre_chain = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    if format == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger, e.g. ``get_logger(__name__).info("dataset_generated")``."""
    return structlog.get_logger(name)
