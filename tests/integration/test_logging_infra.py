from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
log file rotation and that shell output stays free of log records.
"""

import io
import logging
from pathlib import Path

import pytest

from file_explorer.infra.logging import LoggingConfig, configure_logging, shutdown_logging
from file_explorer.infra.logging.core import _QUEUE_LISTENER_ATTR
from file_explorer.infra.logging.handlers import _HANDLER_TAG_ATTR
from file_explorer.interface.cli import app


@pytest.fixture(autouse=True)
def reset_logging():
    """Clean up root logger handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()
    logging.getLogger().setLevel(logging.WARNING)


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """TC-01: Multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(log_level="INFO", console=True)

    configure_logging(cfg)
    initial_handler_count = len(_our_handlers())
    configure_logging(cfg)

    assert len(_our_handlers()) == initial_handler_count == 1


def test_force_reconfigures_level() -> None:
    """TC-02: force=True rebuilds the setup with the new level."""
    configure_logging(LoggingConfig(log_level="ERROR"))
    configure_logging(LoggingConfig(log_level="DEBUG"), force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_log_rotation(tmp_path: Path) -> None:
    """TC-03: File rotation when size limit is exceeded."""
    log_file = tmp_path / "test_rotate.log"
    cfg = LoggingConfig(
        log_level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = logging.getLogger("test_rotate")
    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    # Stopping the listener drains the queue
    shutdown_logging()

    assert log_file.exists()
    assert (tmp_path / "test_rotate.log.1").exists(), "Rotation backup file was not created."


def test_queue_listener_architecture() -> None:
    """TC-04: Root logger uses a single tagged QueueHandler."""
    configure_logging(LoggingConfig(log_level="INFO", console=True))

    root = logging.getLogger()
    assert len(_our_handlers()) == 1
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None


def test_debug_session_writes_log_file_not_stdout(tmp_path: Path) -> None:
    """TC-05: A --debug session logs dispatch decisions to the file only."""
    log_file = tmp_path / "explorer.log"
    out = io.StringIO()

    code = app.main(
        ["--debug", "--no-menu", "--log-file", str(log_file)],
        stdin=io.StringIO("read todo.txt\nexit\n"),
        stdout=out,
    )
    shutdown_logging()

    assert code == 0
    assert "DEBUG" not in out.getvalue()
    content = log_file.read_text(encoding="utf-8")
    assert "Dispatching keyword='read'" in content
    assert "Lookup miss for 'todo.txt'" in content


def test_config_maps_application_keys() -> None:
    """TC-06: LoggingConfig is built from the validated application config."""
    cfg = LoggingConfig.from_app_config({"log_level": "debug", "log_file": "/tmp/x.log", "indent_width": 2})

    assert cfg.log_file == "/tmp/x.log"
    assert cfg.level == logging.DEBUG
    assert LoggingConfig(log_level="verbose").level == logging.WARNING
    assert LoggingConfig(log_level="WARN").level == logging.WARNING


def test_shutdown_detaches_handlers() -> None:
    """TC-07: shutdown_logging leaves no explorer handler behind and allows a fresh setup."""
    configure_logging(LoggingConfig(log_level="INFO"))
    shutdown_logging()

    assert _our_handlers() == []
    assert getattr(logging.getLogger(), _QUEUE_LISTENER_ATTR) is None

    configure_logging(LoggingConfig(log_level="ERROR"))
    assert logging.getLogger().level == logging.ERROR
