"""Centralized logging configuration."""

import logging
import sys
from datetime import datetime

from .config import Config


class MicrosecondFormatter(logging.Formatter):
    """Formatter with microsecond precision timestamps.

    Example output:
        2026-01-15 14:23:45.123456 - leaderbird - INFO - [rest.py:42:connect] - Message here
    """

    def formatTime(self, record, datefmt=None):
        created = datetime.fromtimestamp(record.created)
        stamp = created.strftime(datefmt or "%Y-%m-%d %H:%M:%S")
        return f"{stamp}.{created.microsecond:06d}"


def setup_logger(name: str = "leaderbird", level: str | None = None) -> logging.Logger:
    """Set up and return a configured logger.

    Handlers are attached only once per logger name, so repeated calls
    (e.g. from several modules) do not duplicate output.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            MicrosecondFormatter(
                "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d:%(funcName)s] - %(message)s"
            )
        )
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, (level or Config.LOG_LEVEL).upper(), logging.INFO))

    return logger


logger = setup_logger()
