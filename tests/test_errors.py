# topmark:header:start
#
#   project      : Chirp
#   file         : test_errors.py
#   file_relpath : tests/test_errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error taxonomy: hierarchy, messages, and caller-side handling policies."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from chirp.builder import MessageBuilder
from chirp.errors import (
    ChirpError,
    IconLookupError,
    RenderError,
    SinkFlushError,
    SinkWriteError,
)
from chirp.icons.ids import IconId

if TYPE_CHECKING:
    from collections.abc import Callable

    from tests.sinks import FailingSink


def test_hierarchy() -> None:
    """All render failures are `RenderError`s and `ChirpError`s."""
    assert issubclass(SinkWriteError, RenderError)
    assert issubclass(SinkFlushError, SinkWriteError)
    assert issubclass(IconLookupError, RenderError)
    assert issubclass(RenderError, ChirpError)


def test_sink_write_error_message_and_cause() -> None:
    """The message names the failing line and the underlying cause."""
    cause = OSError("broken pipe")
    err = SinkWriteError(cause, line_index=2)

    assert err.cause is cause
    assert str(err) == "Error writing to output sink (line 2): broken pipe"


def test_sink_flush_error_message() -> None:
    """Flush failures carry their own message."""
    err = SinkFlushError(OSError("disk full"))

    assert str(err) == "Error flushing output sink: disk full"
    assert err.line_index is None


def test_icon_lookup_error_message() -> None:
    """The reserved lookup error names the id."""
    assert "'ghost'" in str(IconLookupError("ghost"))


def test_caller_can_convert_to_own_error(failing_sink: Callable[..., FailingSink]) -> None:
    """Callers may wrap a render failure in their own error type."""

    class AppError(Exception):
        pass

    with pytest.raises(AppError) as excinfo:
        try:
            MessageBuilder().icon(IconId.BUG).message("x").render(
                failing_sink(), enable_color=False
            )
        except RenderError as exc:
            raise AppError("could not report status") from exc

    assert isinstance(excinfo.value.__cause__, SinkWriteError)


def test_caller_branches_with_fallback_arm(failing_sink: Callable[..., FailingSink]) -> None:
    """Branching on error kinds keeps a `RenderError` fallback arm."""
    outcome: str
    try:
        MessageBuilder().message("x").render(failing_sink(), enable_color=False)
        outcome = "ok"
    except SinkWriteError:
        outcome = "write"
    except RenderError:
        outcome = "other"

    assert outcome == "write"
