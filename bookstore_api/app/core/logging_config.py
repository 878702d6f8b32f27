"""
Logging configuration for the Bookstore API.

Handlers are attached to the ``bookstore_api`` package logger rather
than to the root logger, so the service's own records get a uniform
format while uvicorn and the MongoDB driver keep whatever logging the
hosting process sets up.  Records still propagate to the root logger.

When ``LOG_FILE`` is set the same records are also written to a size
rotated file.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

APP_LOGGER = "bookstore_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> logging.Logger:
    """Configure and return the ``bookstore_api`` logger.

    Calling this again once handlers are attached only returns the
    logger; the first configuration wins.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a log file.  If omitted, only the console handler is
        added.
    max_bytes, backup_count : int
        Rotation policy of the file handler.
    """
    logger = logging.getLogger(APP_LOGGER)
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = RotatingFileHandler(
            Path(logfile).resolve(),
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
