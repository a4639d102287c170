"""
Console output for hillclimb loggers.

Library modules only create loggers. Entry points (the CLI, or a verbose
search run) call :func:`configure_hillclimb_logging` so progress lines reach
the terminal when the application has not set up logging itself.
"""

from __future__ import annotations

import logging
from typing import TextIO

PACKAGE_LOGGER = "hillclimb"
CONSOLE_FORMAT = "%(message)s"

_CONSOLE_MARKER = "_hillclimb_console"


def _console_handler(logger: logging.Logger) -> logging.Handler | None:
    for handler in logger.handlers:
        if getattr(handler, _CONSOLE_MARKER, False):
            return handler
    return None


def configure_hillclimb_logging(*, level: int = logging.INFO, stream: TextIO | None = None) -> logging.Handler | None:
    """
    Send ``hillclimb.*`` records to the console unless some handler already receives them.

    Parameters
    ----------
    level : int
        Lowest level shown. Calling again with a lower level widens a console
        handler attached by an earlier call.
    stream : TextIO | None
        Target stream; ``sys.stderr`` when omitted.

    Returns
    -------
    logging.Handler | None
        The console handler owned by hillclimb, or ``None`` when the
        application's own handlers (on ``hillclimb`` or an ancestor) are left in charge.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    existing = _console_handler(package_logger)
    if existing is not None:
        if package_logger.level > level:
            package_logger.setLevel(level)
        return existing

    if package_logger.hasHandlers():
        return None

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    setattr(handler, _CONSOLE_MARKER, True)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return handler


__all__ = ["PACKAGE_LOGGER", "CONSOLE_FORMAT", "configure_hillclimb_logging"]
