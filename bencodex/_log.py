"""structlog configuration for the bencodex command line.

The library itself only calls ``structlog.get_logger(__name__)`` and logs
at debug level; it never configures logging on import.  Entry points call
configure_logging() once.

Environment:
    BENCODEX_LOG_LEVEL   DEBUG, INFO, WARNING (default), ERROR
    BENCODEX_LOG_FORMAT  console (default) or json
"""

from __future__ import annotations

import logging
import os
import sys
from typing import List, Optional

import structlog
from structlog.typing import Processor

LOG_LEVEL_ENV = "BENCODEX_LOG_LEVEL"
LOG_FORMAT_ENV = "BENCODEX_LOG_FORMAT"
DEFAULT_LOG_LEVEL = "WARNING"


def _get_log_level(level: Optional[str]) -> int:
    name = (level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    return getattr(logging, name, logging.WARNING)


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """Send structured logs to stderr, filtered at *level*."""
    fmt = (fmt or os.getenv(LOG_FORMAT_ENV, "console")).lower()

    processors: List[Processor] = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if fmt == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
