"""Structured logging for pagemeta.

The library never configures logging on import. Host applications either call
configure_logging() or route the "pagemeta" stdlib logger themselves.
"""

import logging
import sys

import structlog

from pagemeta.core.config import get_settings

LOGGER_NAME = "pagemeta"


def configure_logging(debug: bool | None = None) -> None:
    if debug is None:
        debug = get_settings().debug
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )
    logging.getLogger(LOGGER_NAME).setLevel(log_level)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Return a logger under the pagemeta namespace (e.g. pagemeta.core.pagination).
    Output always goes through the stdlib logger of that name, so an unconfigured
    host only sees what its own logging setup lets through (WARNING and up by default).
    Processors are read from the current structlog config on every call.
    """
    if name and not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"
    return structlog.wrap_logger(
        logging.getLogger(name or LOGGER_NAME),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
