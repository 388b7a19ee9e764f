from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from .config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV

LEVELS = {'CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG'}


def resolveLevel(level: str | None = None) -> str:
    """Explicit level, else OTPMIGRATE_LOG_LEVEL, else WARNING."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    level = str(level).upper().strip()
    return level if level in LEVELS else DEFAULT_LOG_LEVEL


def setupLogging(level: str | None = None) -> None:
    """Send otpmigrate's log records to stderr through rich."""
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter('%(message)s', datefmt='[%H:%M:%S]'))
    root.addHandler(handler)
    root.setLevel(resolveLevel(level))
