"""Tests for :mod:`nosticky.utilities.logging`."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from uuid import uuid4

import pytest

from nosticky.utilities.logging import _sanitize_logger_name, get_logger


@pytest.fixture
def logger_name() -> str:
    return f"nosticky.tests.{uuid4().hex}"


def test_get_logger_attaches_stream_handler_only_by_default(
    monkeypatch: pytest.MonkeyPatch, logger_name: str
) -> None:
    """Verify loggers stay console-only unless a log directory is configured."""
    monkeypatch.delenv("NOSTICKY_LOG_DIR", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    logger = get_logger(logger_name)

    assert [type(handler) for handler in logger.handlers] == [logging.StreamHandler]
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_get_logger_adds_rotating_file_when_configured(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, logger_name: str
) -> None:
    """Confirm a configured directory receives a rotating log file named after the logger."""
    monkeypatch.setenv("NOSTICKY_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("NOSTICKY_LOG_FILE_BACKUPS", "2")

    logger = get_logger(logger_name)
    file_handlers = [
        handler for handler in logger.handlers if isinstance(handler, RotatingFileHandler)
    ]

    assert len(file_handlers) == 1
    assert file_handlers[0].backupCount == 2
    assert Path(file_handlers[0].baseFilename).name == f"{_sanitize_logger_name(logger_name)}.log"
    for handler in file_handlers:
        handler.close()


def test_get_logger_respects_existing_handlers(logger_name: str) -> None:
    """Ensure a logger configured elsewhere keeps its own handlers."""
    existing = logging.NullHandler()
    logging.getLogger(logger_name).addHandler(existing)

    logger = get_logger(logger_name)

    assert logger.handlers == [existing]


def test_unknown_log_level_falls_back_to_info(
    monkeypatch: pytest.MonkeyPatch, logger_name: str
) -> None:
    """Verify a bogus LOG_LEVEL does not break logger construction."""
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    assert get_logger(logger_name).level == logging.INFO


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("nosticky.no_replay.probe", "nosticky_no_replay_probe"),
        ("a/b", "a_b"),
        ("", "root"),
    ],
)
def test_sanitize_logger_name(name: str, expected: str) -> None:
    """Confirm logger names become safe file names."""
    assert _sanitize_logger_name(name) == expected
