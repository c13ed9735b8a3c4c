"""Logging setup for release-generator."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(filename)s:%(lineno)d %(message)s"


def configure_logging(level: str) -> logging.Logger:
    """
    Send package logs to stderr at the given level.

    An unknown level name is reported and replaced by INFO.

    Args:
        level: Level name such as "debug" or "WARNING"

    Returns:
        The package logger
    """
    logger = logging.getLogger("release_generator")
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    numeric_level = logging.getLevelName(level.strip().upper())
    if isinstance(numeric_level, int):
        logger.setLevel(numeric_level)
    else:
        logger.setLevel(logging.INFO)
        logger.warning("failed to parse log level %r, defaulting to info", level)

    return logger
