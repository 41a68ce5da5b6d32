# topmark:header:start
#
#   project      : Chirp
#   file         : __init__.py
#   file_relpath : src/chirp/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chirp package.

Chirp composes short console messages: an optional semantic icon, one or more
lines of text, each optionally colored. Continuation lines are indented under
the first one.

Example:
    ```python
    from chirp import IconId, MessageBuilder, chirp

    MessageBuilder().icon(IconId.CHECK).message("done").render()
    chirp("Disk almost full", "92% used on /", icon=IconId.WARNING)
    ```
"""

from __future__ import annotations

from chirp.builder import Line, MessageBuilder
from chirp.errors import (
    BuilderConsumedError,
    ChirpError,
    IconLookupError,
    RenderError,
    SinkFlushError,
    SinkWriteError,
)
from chirp.icons import FALLBACK_ENTRY, IconEntry, IconId, IconRegistry
from chirp.rendering.color_mode import ColorMode, resolve_color_mode
from chirp.rendering.colors import Color, colorize
from chirp.sinks import ClickSink, SinkLike, StreamSink


def chirp(
    *messages: object,
    icon: IconId | str | None = None,
    color: Color | str | None = None,
    sink: SinkLike | None = None,
    enable_color: bool | None = None,
) -> None:
    """Render one message block in a single call.

    Args:
        *messages (object): Lines to render, in order.
        icon (IconId | str | None): Optional leading icon.
        color (Color | str | None): Optional color override applied to every line.
        sink (SinkLike | None): Destination; defaults to stdout.
        enable_color (bool | None): Force ANSI styles on or off; ``None`` auto-detects.

    Raises:
        SinkWriteError: If the sink fails to accept a line.
    """
    builder = MessageBuilder()
    if icon is not None:
        builder.icon(icon)
    for text in messages:
        builder.message(text, color)
    builder.render(sink, enable_color=enable_color)


__all__ = [
    "FALLBACK_ENTRY",
    "BuilderConsumedError",
    "ChirpError",
    "ClickSink",
    "Color",
    "ColorMode",
    "IconEntry",
    "IconId",
    "IconLookupError",
    "IconRegistry",
    "Line",
    "MessageBuilder",
    "RenderError",
    "SinkFlushError",
    "SinkLike",
    "SinkWriteError",
    "StreamSink",
    "chirp",
    "colorize",
    "resolve_color_mode",
]
