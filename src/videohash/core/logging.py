"""Logging setup for videohash commands."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO", force: bool = True) -> None:
    """Send pipeline logs to stdout at ``level``.

    ``force`` replaces handlers from an earlier call, so each CLI command
    (``extract --quiet`` included) gets the level it asked for.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=force,
    )
