"""Logging setup for the rmrf CLI.

Library modules only create loggers; handlers are installed here, once,
when the command-line entry point starts.
"""

import logging

from rich.logging import RichHandler

from rmrf.utils.formatting import err_console

LOGGER_NAME = "rmrf"


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Attach a Rich handler to the package logger.

    Calling this again replaces the previously installed handler, so
    repeated CLI invocations in one process don't duplicate output.

    Args:
        verbose: Log every filesystem operation (DEBUG).
        quiet: Only log errors.

    Returns:
        The configured package logger.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=err_console, show_time=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
