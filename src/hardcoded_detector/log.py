"""Logging setup for the command line."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "hardcoded_detector"


def configure_logging(verbose: bool = False, debug: bool = False) -> logging.Logger:
    """Route package logs to stderr through Rich.

    WARNING by default, INFO with *verbose*, DEBUG with *debug*. Safe to call
    more than once; the previous handler is replaced.
    """
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    log = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(log.handlers):
        if isinstance(handler, RichHandler):
            log.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=debug,
        show_path=debug,
        rich_tracebacks=debug,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    log.addHandler(handler)
    log.setLevel(level)
    return log
