"""Logging setup for the trackit command-line application.

Library modules only create ``logging.getLogger(__name__)`` loggers;
handlers are installed once, by the CLI, through ``configure_logging``.
Console output goes through rich so that it shares the CLI's console
styling.  An optional rotating file handler keeps a longer record.
"""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "trackit"
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 3
_FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING", log_file: Path | None = None) -> logging.Logger:
    """Install handlers on the ``trackit`` logger and return it.

    Calling this again replaces the previously installed handlers.

    Parameters
    ----------
    level:
        Console level name, e.g. ``"INFO"``.
    log_file:
        When given, every record at DEBUG and above is also written to
        this file, rotated at ``LOG_FILE_MAX_BYTES``.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    console_handler.setLevel(level.upper())
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(level.upper())

    logger.propagate = False
    return logger
