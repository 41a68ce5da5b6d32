# topmark:header:start
#
#   project      : Chirp
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Internal logging: TRACE level, env resolution, formatter, setup."""

from __future__ import annotations

import logging

import pytest

from chirp.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    ChirpLogger,
    get_logger,
    resolve_env_log_level,
    setup_logging,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("10", 10),
        ("bogus", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None
) -> None:
    """`CHIRP_LOG_LEVEL` accepts level names and numbers."""
    monkeypatch.setenv("CHIRP_LOG_LEVEL", raw)

    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """No variable means no level."""
    assert resolve_env_log_level() is None


def test_get_logger_returns_chirp_logger() -> None:
    """Package loggers support `.trace()`."""
    logger = get_logger("chirp.tests.logging")

    assert isinstance(logger, ChirpLogger)


def test_host_loggers_keep_default_class() -> None:
    """Importing and using Chirp leaves the process-wide logger class alone."""
    get_logger("chirp.tests.scoped")

    assert logging.getLoggerClass() is not ChirpLogger
    assert not isinstance(logging.getLogger("tests.host.component"), ChirpLogger)


def test_get_logger_adds_trace_to_existing_logger(caplog: pytest.LogCaptureFixture) -> None:
    """A plain logger created earlier under the same name still supports `trace()`."""
    plain = logging.getLogger("chirp.tests.preexisting")
    logger = get_logger("chirp.tests.preexisting")
    caplog.set_level(TRACE_LEVEL, logger="chirp.tests.preexisting")

    logger.trace("late %s", "binding")

    assert logger is plain
    assert caplog.records[0].levelno == TRACE_LEVEL


def test_trace_is_emitted_below_debug(caplog: pytest.LogCaptureFixture) -> None:
    """TRACE records are emitted when the level allows them."""
    logger = get_logger("chirp.tests.trace")
    caplog.set_level(TRACE_LEVEL, logger="chirp.tests.trace")

    logger.trace("tracing %s", "works")

    assert [r.levelno for r in caplog.records] == [TRACE_LEVEL]
    assert caplog.records[0].getMessage() == "tracing works"


def test_chalk_formatter_keeps_message() -> None:
    """Formatting decorates but preserves the message text."""
    record = logging.LogRecord("chirp", logging.ERROR, __file__, 1, "boom", None, None)

    assert "[ERROR] boom" in ChalkFormatter("[%(levelname)s] %(message)s").format(record)


def test_setup_logging_installs_single_handler() -> None:
    """`setup_logging()` replaces root handlers with one chalk handler."""
    setup_logging(logging.INFO)
    setup_logging(logging.DEBUG)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, ChalkFormatter)
