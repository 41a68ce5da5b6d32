# topmark:header:start
#
#   project      : Chirp
#   file         : errors.py
#   file_relpath : src/chirp/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by Chirp.

Hierarchy:
    ChirpError
    ├── RenderError                 rendering failed (open for new kinds)
    │   ├── SinkWriteError          the sink rejected a write
    │   │   └── SinkFlushError      the sink rejected the final flush
    │   └── IconLookupError         reserved; a total registry never raises it
    └── BuilderConsumedError        a builder was used after `render()`

Usage:
    Code that branches on specific `RenderError` subclasses must keep a final
    ``except RenderError`` arm: new kinds may be added without notice.

    Chirp never retries or swallows a write failure; what to do with it
    (propagate, convert, log and continue, abort) is the caller's policy.
"""

from __future__ import annotations


class ChirpError(Exception):
    """Base class for all Chirp errors."""


class RenderError(ChirpError):
    """Base class for failures surfaced by `MessageBuilder.render()`."""


class SinkWriteError(RenderError):
    """The output sink failed while a rendered line was being written.

    Attributes:
        cause (BaseException): The exception raised by the sink. Also chained as
            ``__cause__``.
        line_index (int | None): Index of the line whose write failed, or ``None``
            when the failure is not tied to a single line.
    """

    def __init__(self, cause: BaseException, *, line_index: int | None = None) -> None:
        self.cause = cause
        self.line_index = line_index
        where = "" if line_index is None else f" (line {line_index})"
        super().__init__(f"Error writing to output sink{where}: {cause}")


class SinkFlushError(SinkWriteError):
    """The output sink failed to flush after the last rendered line."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(cause)
        self.args = (f"Error flushing output sink: {cause}",)


class IconLookupError(RenderError):
    """An icon id has no registry entry.

    Not raised by the built-in registry, which falls back to a placeholder glyph.
    """

    def __init__(self, icon_id: object) -> None:
        self.icon_id = icon_id
        super().__init__(f"No icon registered for {icon_id!r}")


class BuilderConsumedError(ChirpError, RuntimeError):
    """A `MessageBuilder` was modified or rendered again after `render()`."""

    def __init__(self) -> None:
        super().__init__("MessageBuilder has already been rendered and cannot be reused")
