"""Logging setup for applications embedding the codec.

The codec modules only call ``logging.getLogger(__name__)``; the host
application decides when to call ``configure_logging``.
"""

from __future__ import annotations

import logging
import sys

import structlog

from codice_fiscale.config import normalize_log_level, settings


def configure_logging(level: str | None = None) -> None:
    """Configure stdlib logging and structlog on stdout.

    Args:
        level: Log level name. Defaults to ``settings.log_level``.

    Raises:
        ValueError: If ``level`` is not a standard level name.
    """
    level_name = normalize_log_level(level or settings.log_level)
    logging.basicConfig(
        level=getattr(logging, level_name),
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
        stream=sys.stdout,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
