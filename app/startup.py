"""Startup logging setup."""

import logging

from string_literal_finder.utils import setup_debug_logging

from .config import get_debug, get_log_level

logger = logging.getLogger(__name__)

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def configure_logging() -> None:
    """Configure root logging from LOG_LEVEL; STRING_LITERAL_FINDER_DEBUG turns on finder debug output."""
    level = get_log_level()
    if level not in _LEVELS:
        level = "INFO"
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if get_debug():
        setup_debug_logging()
        logger.info("Debug logging enabled for string_literal_finder")
