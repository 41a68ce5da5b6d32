# topmark:header:start
#
#   project      : Chirp
#   file         : sinks.py
#   file_relpath : src/chirp/sinks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output sinks for rendered messages.

A sink is anything that accepts text writes. The builder writes each rendered
line (terminator included) with one ``write()`` call, then calls ``flush()``
once if the sink has one. A failed write is signaled by raising.

Implementations:
    - `StreamSink`: plain `TextIO` writer (stdlib only).
    - `ClickSink`: writes through `click.echo`. Text arrives already styled or
      plain as decided by `render()`; Click only strips styles when the sink is
      given an explicit ``enable_color=False``.

Sinks do not serialize concurrent writers; wrap the stream if several threads
render to it at once.
"""

from __future__ import annotations

import sys
from typing import Protocol, TextIO, runtime_checkable

import click


@runtime_checkable
class SinkLike(Protocol):
    """Minimal interface of an output sink used by `MessageBuilder.render()`."""

    def write(self, text: str) -> object:
        """Write ``text`` verbatim; raise on failure."""
        ...


def sink_isatty(sink: object) -> bool:
    """Return whether ``sink`` is attached to a terminal (False when unknown)."""
    isatty = getattr(sink, "isatty", None)
    if not callable(isatty):
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


class StreamSink(SinkLike):
    """Sink writing straight to a text stream.

    Args:
        stream (TextIO | None): Destination stream. Defaults to `sys.stdout`
            as resolved at construction time.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout

    def write(self, text: str) -> None:
        """Write ``text`` to the stream."""
        self.stream.write(text)

    def flush(self) -> None:
        """Flush the underlying stream."""
        self.stream.flush()

    def isatty(self) -> bool:
        """Return the TTY status of the underlying stream."""
        return sink_isatty(self.stream)


class ClickSink(SinkLike):
    """Sink writing through `click.echo`.

    Args:
        stream (TextIO | None): Destination stream. Defaults to `sys.stdout`.
        enable_color (bool | None): Color policy handed to `click.echo`. ``False``
            strips ANSI styles. ``None`` (default) keeps whatever `render()` produced,
            so ``FORCE_COLOR`` and ``enable_color=True`` reach non-terminal streams.

    Attributes:
        stream (TextIO): The destination stream.
        enable_color (bool | None): Color policy handed to Click.
    """

    stream: TextIO
    enable_color: bool | None

    def __init__(self, stream: TextIO | None = None, *, enable_color: bool | None = None) -> None:
        self.stream = stream or sys.stdout
        self.enable_color = enable_color

    def write(self, text: str) -> None:
        """Echo ``text`` without adding a newline."""
        keep_styles: bool = self.enable_color is not False
        click.echo(text, nl=False, file=self.stream, color=keep_styles)

    def flush(self) -> None:
        """Flush the underlying stream."""
        self.stream.flush()

    def isatty(self) -> bool:
        """Return the TTY status of the underlying stream."""
        return sink_isatty(self.stream)
