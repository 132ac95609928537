"""Logging configuration driven by application settings."""

import logging
import sys

from src.config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    """Send log records to stderr at the configured level (DEBUG when debugging)."""
    level = logging.DEBUG if settings.debug else logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)
