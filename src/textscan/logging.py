"""Logging setup for TextScan.

All module loggers are children of the ``textscan`` logger, which writes to
stderr so Rich output on stdout stays clean.
"""

import logging
import sys

ROOT_LOGGER_NAME = "textscan"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

logger = logging.getLogger(ROOT_LOGGER_NAME)


def setup_logging(verbose: bool = False) -> None:
    """Configure the textscan logger.

    Warnings and errors are always shown; ``verbose`` adds debug output.
    Calling it again only adjusts the level.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Return the child logger ``textscan.<name>``, e.g. ``analyzer.core``."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
