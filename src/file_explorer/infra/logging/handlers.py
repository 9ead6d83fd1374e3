from __future__ import annotations

"""
Logging Handlers.

Builds the two sinks the explorer writes diagnostics to (stderr and an
optional rotating file) and tags them so they can be told apart from
handlers installed by libraries or test runners.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

_HANDLER_TAG_ATTR: str = "_file_explorer_handler"

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def tag(handler: logging.Handler) -> logging.Handler:
    """Mark a handler as owned by the explorer and return it."""
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def is_tagged(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def console_handler(level: int) -> logging.Handler:
    """Stderr handler, so diagnostics never mix with the shell's stdout."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return tag(handler)


def file_handler(
        log_file: str,
        level: int,
        max_bytes: int,
        backup_count: int,
) -> Optional[logging.Handler]:
    """
    Rotating file handler for --log-file.

    Returns:
        Optional[logging.Handler]: The handler, or None if the file cannot be opened.
    """
    try:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{log_file}': {e}\n")
        return None

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return tag(handler)
