"""Logging setup for the passphrases CLI."""

from __future__ import annotations

import logging


_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOGGER_NAME = "passphrases"


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: str | None = None,
) -> logging.Logger:
    """Configure and return the package logger.

    verbose selects DEBUG, quiet selects WARNING, otherwise INFO. With
    log_file, records are also written there. Generated passphrases are
    never logged, only counts and list sizes.
    """
    logger = logging.getLogger(LOGGER_NAME)

    # repeated calls (tests, multiple CLI invocations) must not stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if verbose:
        logger.setLevel(logging.DEBUG)
    elif quiet:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.INFO)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger
