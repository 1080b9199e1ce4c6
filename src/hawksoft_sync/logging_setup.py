"""Console logging for the hawksoft-sync CLI.

The level comes from the ``level`` argument, else the ``LOG_LEVEL``
environment variable (DEBUG, INFO, WARNING, ERROR, CRITICAL), else INFO.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler


def get_log_level() -> int:
    """Read LOG_LEVEL from the environment, falling back to INFO."""
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        return logging.INFO
    return level


def setup_logging(level: int | None = None) -> None:
    """Route all loggers to a Rich handler on stderr."""
    if level is None:
        level = get_log_level()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(handler)

    # Request lines from httpx would drown out batch progress
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
