"""Logging setup for studentform."""

import logging

LOGGER_NAME = "studentform"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Configure the package logger with a single console handler.

    Safe to call more than once: the handler is only added the first
    time, later calls just change the level.

    Args:
        level: Logging level name or number.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
