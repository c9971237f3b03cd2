"""structlog configuration for shopcart.

Handlers log through stdlib loggers named after their modules, so the
``shopcart`` logger alone decides what reaches stderr: checkout failures
always, item and checkout progress only with ``--verbose``.
"""

from __future__ import annotations

import logging
import sys

import structlog

SHOPCART_LOGGER = "shopcart"


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Render shopcart events to stderr, as console text or JSON lines.

    Safe to call more than once; the previous handler is replaced.
    """
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    logger = logging.getLogger(SHOPCART_LOGGER)
    logger.handlers.clear()
    logger.addHandler(logging.StreamHandler(sys.stderr))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
