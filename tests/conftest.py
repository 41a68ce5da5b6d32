# topmark:header:start
#
#   project      : Chirp
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Chirp test suite.

Keeps every test independent of the developer's shell environment (color and
log-level variables) and of logging state left behind by CLI invocations.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from tests.sinks import FailingSink, RecordingSink

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure color and log-level variables exported in the shell do not leak in.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            the environment.
    """
    for name in ("CHIRP_LOG_LEVEL", "FORCE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Restore root logger handlers and level after each test.

    `setup_logging()` (called by the CLI) replaces root handlers with a handler
    bound to the current `sys.stdout`, which `CliRunner` closes afterwards.
    """
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def recording_sink() -> RecordingSink:
    """Return an empty in-memory sink."""
    return RecordingSink()


@pytest.fixture
def failing_sink() -> Callable[..., FailingSink]:
    """Return a factory for sinks that fail on a chosen write or on flush."""
    return FailingSink
