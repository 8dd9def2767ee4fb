"""Logging setup for embedclient."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from embedclient.ui.console import get_console

LOGGER_NAME = "embedclient"


def configure_logging(debug: bool = False) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(
        console=get_console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False
    return logger


def ensure_debug_logging() -> logging.Logger:
    """Make debug records from the package visible without clobbering existing setup."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.hasHandlers():
        return configure_logging(True)
    if logger.getEffectiveLevel() > logging.DEBUG:
        logger.setLevel(logging.DEBUG)
    return logger
