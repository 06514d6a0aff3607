"""Log file setup for taskseed.

Every module logs through ``logging.getLogger(__name__)``; records from the
``taskseed.*`` hierarchy end up in one rotating file under the platformdirs
user log directory once :func:`get_logger` has run.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

LOGGER_NAME = "taskseed"
LOG_FILE_NAME = "taskseed.log"
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    """Location of the active log file."""
    return Path(user_log_dir(LOGGER_NAME)) / LOG_FILE_NAME


def _file_handler(logger: logging.Logger, path: Path) -> logging.Handler | None:
    for handler in logger.handlers:
        if (
            isinstance(handler, logging.handlers.RotatingFileHandler)
            and handler.baseFilename == os.path.abspath(path)
        ):
            return handler
    return None


def get_logger() -> logging.Logger:
    """Return the ``taskseed`` logger, attaching its file handler on first use.

    Handlers other code has put on the logger (capture handlers in tests,
    for instance) are left alone; only a file handler for the same path
    counts as already configured.
    """
    global _logger
    if _logger is not None:
        return _logger

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    path = log_file_path()
    if _file_handler(logger, path) is None:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=MAX_LOG_BYTES,
            backupCount=LOG_BACKUPS,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)

    _logger = logger
    return _logger
