"""Logging configuration."""

import logging
import sys

from fundtrades.config.settings import get_settings

# Close fetches run on worker threads; threadName tells them apart
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(threadName)s] %(message)s"

_NOISY_LOGGERS = ("sqlalchemy.engine", "httpx", "httpcore", "yfinance", "peewee")


def setup_logging() -> None:
    """Configure root logging from Settings.log_level."""
    settings = get_settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
