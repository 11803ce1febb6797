"""File logging for the interactive list.

The terminal belongs to the UI, so records never go to stdout or stderr.
Without ``--log-file`` the package logger only carries a ``NullHandler``.
"""

from __future__ import annotations

import logging
from pathlib import Path

PACKAGE_LOGGER = "lazylist"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def _has_file_handler(logger: logging.Logger, filename: str) -> bool:
    return any(
        isinstance(handler, logging.FileHandler) and handler.baseFilename == filename
        for handler in logger.handlers
    )


def setup_logging(log_file: Path | None, level: int = logging.DEBUG) -> logging.Logger:
    """Attach a file handler for ``log_file`` to the package logger.

    Repeated calls with the same path do not add duplicate handlers. Passing
    ``None`` leaves logging silent.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if log_file is None:
        return logger
    filename = str(log_file.expanduser().resolve())
    logger.setLevel(level)
    if not _has_file_handler(logger, filename):
        handler = logging.FileHandler(filename, encoding="utf-8")
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
