"""
Logging setup.

Library modules only call structlog.get_logger(); applications decide how
the output looks by calling configure_logging() once at startup.
"""

import logging

import structlog

from ..config import Settings


def configure_logging(config: Settings) -> None:
    """
    Configure structlog on top of the standard library logger.

    Args:
        config: Settings providing log_level and log_format
                ("json" for machine-readable lines, "plain" for a console)
    """
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.log_level}")

    if config.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    elif config.log_format == "plain":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        raise ValueError(f"Unknown log format: {config.log_format}")

    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger().setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
