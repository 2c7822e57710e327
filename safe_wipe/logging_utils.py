"""
Logging helpers for safe-wipe.

Library modules only create loggers. The command line tool calls
configure_logging, which sets up the ``safe_wipe`` logger alone and
leaves the root logger to whatever application embeds the package.
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
HANDLER_NAME = "safe-wipe"


def verbosity_to_level(verbosity: int) -> int:
    """
    verbosity == 0 -> WARNING
    verbosity == 1 -> INFO
    verbosity >= 2 -> DEBUG
    """

    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbosity: int, stream: Optional[TextIO] = None) -> None:
    """
    Send ``safe_wipe`` log records at the level given by a ``-v`` count
    to ``stream``.

    Calling it again replaces the handler installed by the previous call.
    """

    logger = logging.getLogger("safe_wipe")
    logger.setLevel(verbosity_to_level(verbosity))

    for handler in list(logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
