"""Tests for the TRACE level and the environment log-level override."""

from __future__ import annotations

import logging as std_logging

import pytest

from headstamp.config import logging
from tests.conftest import parametrize


@parametrize(
    ("value", "expected"),
    [
        ("trace", logging.TRACE_LEVEL),
        (" DEBUG ", std_logging.DEBUG),
        ("info", std_logging.INFO),
        ("", None),
        ("verbose", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    monkeypatch.setenv(logging.LOG_LEVEL_ENV_VAR, value)
    assert logging.resolve_env_log_level() == expected


def test_unset_env_means_no_override() -> None:
    assert logging.resolve_env_log_level() is None


def test_trace_records_use_the_trace_level(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.get_logger("headstamp.tests.trace")
    with caplog.at_level(logging.TRACE_LEVEL, logger="headstamp.tests.trace"):
        logger.trace("value=%d", 3)

    assert [(r.levelname, r.getMessage()) for r in caplog.records] == [("TRACE", "value=3")]
