"""Logging setup for the command line."""

from __future__ import annotations

import logging
from typing import Final

LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
CHATTY_LOGGERS: Final[tuple[str, ...]] = ("httpx", "httpcore")


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Configure the root logger for CLI output.

    ``httpx`` and ``httpcore`` log every block lookup, so they stay at WARNING
    unless ``level`` is DEBUG. Pass ``force=True`` to replace existing handlers.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
    chatty_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(chatty_level)
