"""Diagnostic logging setup for the rsp package.

Every module logs through `logging.getLogger(__name__)`; this installs a
single stderr handler on the package logger. Program output from the
`log/` builtins does not go through here.
"""

from __future__ import annotations

import logging

from rsp.config import get_log_level

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    logger = logging.getLogger("rsp")
    if level is None:
        level = get_log_level()
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)
    if not any(getattr(h, "_rsp_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._rsp_handler = True
        logger.addHandler(handler)
    return logger
