"""Logging setup shared by the game core and the CLI."""

import logging
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: int = logging.WARNING, stream: Optional[TextIO] = None) -> None:
    """Send log records to ``stream`` (stderr by default) at ``level``.

    The CLI calls this with DEBUG under ``--verbose`` so accepted and rejected
    words, refills and level endings are traced alongside the board. The
    core never calls it; embedding code configures logging its own way.
    Calling it again replaces the handler instead of stacking another.
    """
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger under ``lettercraze``."""
    return logging.getLogger(name or "lettercraze")
