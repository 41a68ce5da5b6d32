# topmark:header:start
#
#   project      : Chirp
#   file         : test_public_api.py
#   file_relpath : tests/test_public_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API surface: re-exports and the `chirp()` convenience function."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

import chirp as chirp_pkg
from chirp import IconId, SinkWriteError, chirp
from chirp.sinks import ClickSink, SinkLike, StreamSink

if TYPE_CHECKING:
    from collections.abc import Callable

    from tests.sinks import FailingSink, RecordingSink


def test_all_names_are_exported() -> None:
    """Every name in `__all__` is importable from the package root."""
    for name in chirp_pkg.__all__:
        assert hasattr(chirp_pkg, name), name


def test_chirp_renders_one_block(recording_sink: RecordingSink) -> None:
    """`chirp()` builds and renders in one call."""
    chirp(
        "Disk almost full",
        "92% used",
        icon=IconId.WARNING,
        sink=recording_sink,
        enable_color=False,
    )

    assert recording_sink.writes == ["⚠ Disk almost full\n", "  92% used\n"]


def test_chirp_accepts_names(recording_sink: RecordingSink) -> None:
    """Icons and colors may be given by name."""
    chirp("saved", icon="ok", color="cyan", sink=recording_sink, enable_color=True)

    assert recording_sink.writes == ["\x1b[36m✓ saved\x1b[39m\n"]


def test_chirp_without_arguments_is_a_no_op(recording_sink: RecordingSink) -> None:
    """Nothing to say means nothing written."""
    chirp(sink=recording_sink)

    assert recording_sink.writes == []


def test_chirp_unknown_icon_name_raises() -> None:
    """Unknown icon names are rejected before rendering."""
    with pytest.raises(ValueError, match="Unknown icon"):
        chirp("x", icon="sparkles")


def test_chirp_propagates_sink_errors(failing_sink: Callable[..., FailingSink]) -> None:
    """Write failures surface to the caller."""
    with pytest.raises(SinkWriteError):
        chirp("x", sink=failing_sink(), enable_color=False)


def test_builtin_sinks_satisfy_protocol() -> None:
    """Both built-in sinks are recognized as `SinkLike`."""
    assert isinstance(StreamSink(), SinkLike)
    assert isinstance(ClickSink(), SinkLike)


def test_click_sink_strips_styles_when_color_disabled(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """`ClickSink(enable_color=False)` lets Click remove ANSI styles."""
    sink = ClickSink(enable_color=False)
    sink.write("\x1b[31mx\x1b[39m\n")

    assert capsys.readouterr().out == "x\n"


def test_click_sink_keeps_forced_styles(
    capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    """With no policy of its own, `ClickSink` keeps the styling `render()` chose."""
    monkeypatch.setenv("FORCE_COLOR", "1")
    chirp("x", icon=IconId.CHECK, sink=ClickSink())

    assert capsys.readouterr().out == "\x1b[32m✓ x\x1b[39m\n"
