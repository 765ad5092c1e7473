"""Logging setup for command-line and host processes."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "INFO", *, console: Console | None = None) -> logging.Logger:
    """Attach a rich handler to the ``talentscout`` logger tree.

    Library code only creates loggers; hosts call this once at startup.
    """
    logger = logging.getLogger("talentscout")
    logger.setLevel(level.upper())
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=console or Console(stderr=True), show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger
