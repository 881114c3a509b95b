"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "ag_csharp"


def configure_logging(level: str = "WARNING", *, console: Console | None = None) -> logging.Logger:
    """Attach a rich stderr handler to the package logger.

    Calling this again only updates the level.

    Args:
        level: Logging level name for the package logger.
        console: Console to write to. Defaults to a stderr console.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if any(isinstance(handler, RichHandler) for handler in logger.handlers):
        return logger

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
