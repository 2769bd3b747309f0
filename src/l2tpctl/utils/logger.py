"""
Logging setup based on loguru.

Usage:
    from l2tpctl.utils.logger import get_logger

    logger = get_logger(__name__)
    logger.debug("connected")
"""

import sys
import traceback

from loguru import logger as _logger

from l2tpctl.models.enums import LogLevel

LOG_FORMAT = "<level>{level: <8}</level> | <cyan>{extra[name]}</cyan> - {message}"
LOG_FORMAT_FULL = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - {message}"
)

_LEVEL_MAP = {
    LogLevel.FULL: "TRACE",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARNING",
}

_logger.configure(extra={"name": "l2tpctl"})

# Silent until a front end calls configure_logging
_logger.disable("l2tpctl")


def configure_logging(level: LogLevel | str = LogLevel.WARNING) -> None:
    """
    Replace loguru's default sink with a stderr sink at the given level.

    Args:
        level: LogLevel member or its string value.
    """
    level = LogLevel(level)
    _logger.remove()
    _logger.enable("l2tpctl")
    _logger.add(
        sys.stderr,
        level=_LEVEL_MAP[level],
        format=LOG_FORMAT_FULL if level == LogLevel.FULL else LOG_FORMAT,
        backtrace=level == LogLevel.FULL,
        diagnose=False,
    )


def get_logger(name: str):
    """Get a logger bound to a module name."""
    return _logger.bind(name=name)


def format_traceback(exc: BaseException) -> str:
    """Format an exception with its traceback."""
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
