import logging
import sys
from typing import Optional

from auth0_management.config.settings import LoggingSettings, get_settings

LOGGER_NAME = "auth0_management"


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger with a console handler.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: Log record format

    Returns:
        The configured package logger

    Raises:
        pydantic.ValidationError: If the level is not a known logging level
    """
    settings: LoggingSettings = get_settings().logging
    level = LoggingSettings(level=level).level if level else settings.level
    fmt = fmt or settings.format

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level))

    # Remove handlers added by an earlier call
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, level))
    console_handler.setFormatter(logging.Formatter(fmt, datefmt='%Y-%m-%d %H:%M:%S'))
    logger.addHandler(console_handler)
    logger.propagate = False

    return logger
