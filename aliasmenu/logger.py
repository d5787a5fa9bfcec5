"""Logging setup, rich output on stderr"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "aliasmenu"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single RichHandler to the aliasmenu logger"""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Remove existing handlers
    logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True), show_time=verbose, show_path=False
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
