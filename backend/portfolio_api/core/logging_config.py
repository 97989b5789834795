"""Logging setup."""

import logging

from portfolio_api.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Safe to call more than once; the handler is only installed the first time.

    Args:
        level: Log level name. Defaults to ``settings.log_level``.

    Returns:
        The ``portfolio_api`` logger
    """
    logger = logging.getLogger("portfolio_api")
    logger.setLevel((level or settings.log_level).upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
