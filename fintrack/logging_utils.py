"""Logging helpers for fintrack.

Log records go to stderr through a rich handler. User-facing output is
printed on a rich Console by the commands, never through these loggers.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

_configured = False


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure the fintrack logger once. Later calls only change the level.

    Args:
        level: Logging level for the fintrack logger.
    """
    global _configured

    logger = logging.getLogger("fintrack")
    logger.setLevel(level)

    if _configured:
        return

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s - %(message)s", datefmt="[%X]"))
    logger.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the fintrack namespace."""
    return logging.getLogger(name)
