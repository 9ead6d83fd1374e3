from __future__ import annotations

"""
Logging Core.

Sets up the root logger for an explorer session. Records pass through a
single QueueHandler and are written by a QueueListener, so opening and
rotating the log file never blocks the shell loop.
"""

import atexit
import logging
import queue
from dataclasses import dataclass
from logging.handlers import QueueHandler, QueueListener
from typing import Any, Dict, List, Optional

from file_explorer.infra.logging.handlers import console_handler, file_handler, is_tagged, tag

# The active listener is stored on the root logger; its presence marks the setup as done
_QUEUE_LISTENER_ATTR: str = "_file_explorer_queue_listener"

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging settings of one session.

    Field names mirror the application config keys so the validated
    configuration maps onto this object directly.

    Attributes:
        log_level: Minimum level name, case-insensitive. Unknown names mean WARNING.
        log_file: Optional path of a rotating log file.
        console: Write records to stderr.
        max_bytes: Size at which the log file is rotated.
        backup_count: Rotated files kept next to the active one.
    """
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    console: bool = True
    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    @classmethod
    def from_app_config(cls, cfg: Dict[str, Any]) -> LoggingConfig:
        return cls(log_level=cfg["log_level"], log_file=cfg["log_file"])

    @property
    def level(self) -> int:
        name = (self.log_level or "").strip().upper()
        return getattr(logging, name) if name in _LEVEL_NAMES else logging.WARNING


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once per process, unless force is given.

    Args:
        cfg: Logging settings.
        force: Tear down the current setup and rebuild it from cfg.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _QUEUE_LISTENER_ATTR, None) is not None and not force:
        return root

    shutdown_logging()
    root.setLevel(cfg.level)

    sinks: List[logging.Handler] = []
    if cfg.console:
        sinks.append(console_handler(cfg.level))
    if cfg.log_file:
        fh = file_handler(cfg.log_file, cfg.level, cfg.max_bytes, cfg.backup_count)
        if fh is not None:
            sinks.append(fh)

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
    listener.start()

    root.addHandler(tag(QueueHandler(log_queue)))
    setattr(root, _QUEUE_LISTENER_ATTR, listener)

    # Flush pending records on interpreter shutdown
    atexit.register(_stop_listener, listener)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a named logger (usually called with __name__)."""
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """Drain and stop the listener, then detach and close the explorer's handlers."""
    root = logging.getLogger()
    _stop_listener(getattr(root, _QUEUE_LISTENER_ATTR, None))
    setattr(root, _QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if is_tagged(h):
            root.removeHandler(h)
            h.close()


def _stop_listener(listener: Optional[QueueListener]) -> None:
    # stop() on an already stopped listener fails; its thread is None by then
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
