# topmark:header:start
#
#   project      : Quietmark
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TRACE level, the logger class and environment log levels."""

from __future__ import annotations

import logging as std_logging

import pytest

from quietmark.config.logging import (
    LOG_LEVEL_ENV,
    TRACE_LEVEL,
    ChalkFormatter,
    QuietmarkLogger,
    get_logger,
    resolve_env_log_level,
)
from tests.conftest import parametrize


def test_trace_level_is_registered() -> None:
    """TRACE sits below DEBUG and has a name."""
    assert TRACE_LEVEL < std_logging.DEBUG
    assert std_logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_get_logger_returns_quietmark_logger(caplog: pytest.LogCaptureFixture) -> None:
    """Module loggers expose ``trace()``."""
    logger = get_logger("quietmark.tests.logging")
    assert isinstance(logger, QuietmarkLogger)
    with caplog.at_level(TRACE_LEVEL, logger="quietmark.tests.logging"):
        logger.trace("walking %s", "tree")
    assert any(
        r.levelno == TRACE_LEVEL and r.getMessage() == "walking tree" for r in caplog.records
    )


@parametrize(
    "value, expected",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", std_logging.DEBUG),
        (" warn ", std_logging.WARNING),
        ("10", 10),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    """QUIETMARK_LOG_LEVEL accepts names and numbers."""
    monkeypatch.setenv(LOG_LEVEL_ENV, value)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """Without the variable there is no override."""
    assert resolve_env_log_level() is None


def test_formatter_keeps_message() -> None:
    """Colored output still contains the formatted message."""
    record = std_logging.LogRecord(
        "x", std_logging.WARNING, __file__, 1, "hello %s", ("you",), None
    )
    assert "hello you" in ChalkFormatter("%(message)s").format(record)
