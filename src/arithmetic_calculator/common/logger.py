"""Shared logger for the arithmetic calculator."""
import logging
import sys
from typing import Union

LOGGER_NAME = "arithmetic_calculator"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger: logging.Logger = logging.getLogger(LOGGER_NAME)


def configure_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """
    Configure the package logger with a single stderr handler.

    Calling it again only updates the level, so handlers are never duplicated.

    :param level: Logging level name or number

    :return: The configured package logger
    :rtype: logging.Logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger
