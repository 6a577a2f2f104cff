"""Logging configuration for symlink-track using loguru.

Importing the package leaves existing sinks and handlers alone; ``configure_logging`` is called by the CLI. All log
output goes to ``stderr`` so that it never interleaves with the resolved chain printed on ``stdout``.
Standard-library ``logging`` records are intercepted and forwarded to loguru.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

from loguru import logger

from symlinktrack.config import DEFAULT_LOG_LEVEL, LOG_FORMAT_ENV, LOG_LEVEL_ENV

if TYPE_CHECKING:
    from loguru import Logger

_TEXT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level> {extra[extra]}"
)


class InterceptHandler(logging.Handler):
    """Forward standard-library logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        """Emit ``record`` through loguru, preserving its level and caller depth."""
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame = logging.currentframe()
        depth = 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging() -> None:
    """Configure loguru from the environment.

    ``SYMLINK_TRACK_LOG_LEVEL`` sets the minimum level (default ``WARNING``) and
    ``SYMLINK_TRACK_LOG_FORMAT`` selects ``text`` (default) or ``json`` output.
    """
    level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    serialize = os.getenv(LOG_FORMAT_ENV, "text").lower() == "json"

    logger.remove()
    logger.enable("symlinktrack")
    logger.configure(extra={"name": "symlinktrack", "extra": ""})
    if serialize:
        logger.add(sys.stderr, level=level, serialize=True)
    else:
        logger.add(sys.stderr, level=level, format=_TEXT_FORMAT, colorize=None)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def get_logger(name: str) -> Logger:
    """Return a loguru logger bound to the module ``name``.

    Parameters
    ----------
    name : str
        Usually ``__name__`` of the calling module.

    Returns
    -------
    Logger
        A bound loguru logger.

    """
    return logger.bind(name=name)


# Silent when used as a library until the CLI calls ``configure_logging``
logger.disable("symlinktrack")
