"""Logging setup for the command line entry point."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr.

    An existing logging configuration (e.g. when embedded in another tool) is
    left alone apart from the level.
    """

    level = logging.DEBUG if verbose else logging.INFO
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
            handlers=[logging.StreamHandler(sys.stderr)],
        )
    else:
        root.setLevel(level)
