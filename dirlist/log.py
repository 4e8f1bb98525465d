"""Logging setup for the command-line front door.

Library modules log through ``logging.getLogger(__name__)`` and never print.
The CLI installs one stderr handler on the ``dirlist`` logger.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "dirlist"


class ColoredFormatter(logging.Formatter):
    """``LEVEL: message`` formatter with optional colored level names"""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        level = record.levelname
        if self.use_color:
            level = f"{self.COLORS.get(record.levelname, '')}{level}{self.COLORS['RESET']}"
        log_line = f"{LOGGER_NAME}: {level}: {record.getMessage()}"

        if record.exc_info:
            log_line += f"\n{self.formatException(record.exc_info)}"

        return log_line


class _CliHandler(logging.StreamHandler):
    """Stream handler owned by ``configure_logging``."""


def configure_logging(verbose: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Install (or reconfigure) the single ``dirlist`` stderr handler.

    Level is WARNING by default and DEBUG when ``verbose``. Calling this twice
    replaces the earlier handler instead of stacking a second one.
    """
    if stream is None:
        stream = sys.stderr
    logger = logging.getLogger(LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING

    for handler in list(logger.handlers):
        if isinstance(handler, _CliHandler):
            logger.removeHandler(handler)

    handler = _CliHandler(stream)
    handler.setLevel(level)
    is_tty = hasattr(stream, "isatty") and stream.isatty()
    handler.setFormatter(ColoredFormatter(use_color=is_tty))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
