"""Structured logging setup."""

import logging

import structlog


def configure_logging(config=None, force: bool = False) -> None:
    """
    Configure structlog on top of the stdlib logging module.

    Args:
        config: Settings object with ``log_level`` and ``log_format``.
            Defaults to the package settings.
        force: Reconfigure even if structlog was already configured
            by the host application.
    """
    if config is None:
        from ..config import settings as config

    if structlog.is_configured() and not force:
        return

    if config.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

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

    logging.getLogger("py_prelude").setLevel(config.log_level.upper())
