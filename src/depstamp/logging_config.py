"""
Logging configuration for depstamp.

All diagnostics go to stderr through a rich handler so that stdout only ever
carries the provenance token.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "depstamp"


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Configure the depstamp logger with a rich handler on stderr.

    Calling this again replaces the previously installed handlers, so repeated
    CLI invocations in one process (tests) do not stack output.

    Args:
        verbose: Enable DEBUG level logging
        quiet: Suppress all but ERROR level logging

    Returns:
        Configured logger instance for depstamp
    """
    # Determine log level
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    console = Console(stderr=True)

    rich_handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )
    # Component tag in front of every message
    rich_handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(rich_handler)
    logger.setLevel(level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'depstamp.detector')
              If None, returns the root depstamp logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER)

    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"

    return logging.getLogger(name)
