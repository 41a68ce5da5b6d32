# topmark:header:start
#
#   project      : Chirp
#   file         : builder.py
#   file_relpath : src/chirp/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Message builder: accumulate an icon and lines, then render them once.

Lifecycle:
    ``Empty -> Accumulating -> Rendered``. `icon()`, `message()` and
    `messages()` may be called in any order and any number of times;
    `render()` consumes the builder. Any later call raises
    [`BuilderConsumedError`][chirp.errors.BuilderConsumedError], also after a
    failed render.

Layout rules:
    * Line 0 is prefixed with the icon glyph and a single space when an icon
      is set, and with nothing otherwise.
    * Lines 1..N-1 are prefixed with a two-space indent and no glyph.
    * With an icon and no lines, the glyph alone is rendered.
    * With neither, nothing is written.

Coloring rules:
    A line uses its own color override, else the icon's default color, else no
    color. The whole line (prefix included) is styled with one colorizer call.

Example:
    ```python
    from chirp import IconId, MessageBuilder

    (
        MessageBuilder()
        .icon(IconId.CHECK)
        .message("Build finished")
        .message("3 warnings", color="yellow")
        .render()
    )
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chirp.config.logging import get_logger
from chirp.constants import CONTINUATION_INDENT, GLYPH_SEPARATOR, LINE_TERMINATOR
from chirp.errors import BuilderConsumedError, SinkFlushError, SinkWriteError
from chirp.icons.ids import IconId
from chirp.icons.registry import IconEntry, IconRegistry
from chirp.rendering.color_mode import ColorMode, resolve_color_mode
from chirp.rendering.colors import Color, colorize
from chirp.sinks import SinkLike, StreamSink, sink_isatty

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chirp.config.logging import ChirpLogger

logger: ChirpLogger = get_logger(__name__)


@dataclass(frozen=True)
class Line:
    """A single line of message text.

    Attributes:
        text (str): Line content, without terminator.
        color (Color | None): Explicit color override; ``None`` inherits the
            icon's default color (or stays uncolored).
    """

    text: str
    color: Color | None = None


def _coerce_color(color: Color | str | None) -> Color | None:
    """Return ``color`` as a `Color`, raising `ValueError` for unknown names."""
    if color is None:
        return None
    parsed: Color | None = Color.parse(color)
    if parsed is None:
        valid: str = ", ".join(c.value for c in Color)
        raise ValueError(f"Unknown color {color!r}. Must be one of: {valid}")
    return parsed


def _coerce_icon(icon_id: IconId | str) -> IconId:
    """Return ``icon_id`` as an `IconId`, raising `ValueError` for unknown names."""
    if isinstance(icon_id, IconId):
        return icon_id
    parsed: IconId | None = IconId.parse(icon_id)
    if parsed is None:
        raise ValueError(f"Unknown icon {icon_id!r}")
    return parsed


class MessageBuilder:
    """Fluent, single-use accumulator for one console message block.

    A builder belongs to one call site and is not shared between threads.
    """

    def __init__(self) -> None:
        self._icon_id: IconId | None = None
        self._lines: list[Line] = []
        self._rendered: bool = False

    def __repr__(self) -> str:
        state = "rendered" if self._rendered else f"{len(self._lines)} line(s)"
        return f"MessageBuilder(icon={self._icon_id!r}, {state})"

    def _ensure_open(self) -> None:
        if self._rendered:
            raise BuilderConsumedError()

    @property
    def icon_id(self) -> IconId | None:
        """The icon set on this builder, if any."""
        return self._icon_id

    @property
    def lines(self) -> tuple[Line, ...]:
        """Accumulated lines in append order."""
        return tuple(self._lines)

    @property
    def is_rendered(self) -> bool:
        """Whether `render()` has consumed this builder."""
        return self._rendered

    def icon(self, icon_id: IconId | str) -> MessageBuilder:
        """Set the icon, replacing any previous one.

        The registry is not consulted until render time.

        Args:
            icon_id (IconId | str): An `IconId`, or a key/name/alias accepted by
                `IconId.parse`.

        Returns:
            MessageBuilder: This builder, for chaining.

        Raises:
            ValueError: If ``icon_id`` is a string that names no icon.
            BuilderConsumedError: If the builder was already rendered.
        """
        self._ensure_open()
        self._icon_id = _coerce_icon(icon_id)
        return self

    def message(self, text: object, color: Color | str | None = None) -> MessageBuilder:
        """Append one line.

        Args:
            text (object): Line content; non-strings are converted with `str()`.
                An empty string renders as a blank (prefix-only) line.
            color (Color | str | None): Optional color override for this line.

        Returns:
            MessageBuilder: This builder, for chaining.

        Raises:
            ValueError: If ``color`` is a string that names no color.
            BuilderConsumedError: If the builder was already rendered.
        """
        self._ensure_open()
        self._lines.append(Line(text=str(text), color=_coerce_color(color)))
        return self

    def messages(self, texts: Iterable[object]) -> MessageBuilder:
        """Append every item of ``texts`` as a line without color override.

        Equivalent to calling `message()` once per item, in iteration order.

        Args:
            texts (Iterable[object]): Finite iterable of line contents.

        Returns:
            MessageBuilder: This builder, for chaining.

        Raises:
            BuilderConsumedError: If the builder was already rendered.
        """
        self._ensure_open()
        self._lines.extend(Line(text=str(text)) for text in texts)
        return self

    def to_lines(self, *, enable_color: bool = False) -> list[str]:
        """Return the exact strings `render()` would write, terminators included.

        Does not consume the builder.

        Args:
            enable_color (bool): Whether to apply ANSI styles.

        Returns:
            list[str]: One entry per write, in order.

        Raises:
            BuilderConsumedError: If the builder was already rendered.
        """
        self._ensure_open()
        return self._format_lines(enable_color=enable_color)

    def _format_lines(self, *, enable_color: bool) -> list[str]:
        entry: IconEntry | None = (
            IconRegistry.lookup(self._icon_id) if self._icon_id is not None else None
        )
        default_color: Color | None = entry.color if entry is not None else None

        if not self._lines:
            if entry is None:
                return []
            glyph: str = colorize(entry.glyph, default_color, enable_color=enable_color)
            return [glyph + LINE_TERMINATOR]

        rendered: list[str] = []
        for index, line in enumerate(self._lines):
            if index > 0:
                prefix = CONTINUATION_INDENT
            elif entry is not None:
                prefix = entry.glyph + GLYPH_SEPARATOR
            else:
                prefix = ""
            color: Color | None = line.color or default_color
            rendered.append(
                colorize(prefix + line.text, color, enable_color=enable_color) + LINE_TERMINATOR
            )
        return rendered

    def render(
        self,
        sink: SinkLike | None = None,
        *,
        enable_color: bool | None = None,
    ) -> None:
        """Write the message to ``sink`` and consume the builder.

        Args:
            sink (SinkLike | None): Destination. Defaults to a `StreamSink` over
                the current `sys.stdout`.
            enable_color (bool | None): Force ANSI styles on or off. ``None``
                resolves via `resolve_color_mode()` from the environment and the
                sink's TTY status.

        Raises:
            BuilderConsumedError: If the builder was already rendered.
            SinkWriteError: If a write fails. Remaining lines are not written and
                lines already written are not retracted.
            SinkFlushError: If the final flush fails.
        """
        self._ensure_open()
        self._rendered = True

        out: SinkLike = sink if sink is not None else StreamSink()
        if enable_color is None:
            enable_color = resolve_color_mode(
                color_mode_override=ColorMode.AUTO,
                stdout_isatty=sink_isatty(out),
            )

        rendered: list[str] = self._format_lines(enable_color=enable_color)
        logger.trace(
            "Rendering %d line(s) (icon=%s, color=%s)", len(rendered), self._icon_id, enable_color
        )
        if not rendered:
            return

        for index, text in enumerate(rendered):
            try:
                out.write(text)
            except Exception as exc:
                logger.debug("Write of line %d failed: %s", index, exc)
                raise SinkWriteError(exc, line_index=index) from exc

        flush = getattr(out, "flush", None)
        if callable(flush):
            try:
                flush()
            except Exception as exc:
                logger.debug("Flush failed: %s", exc)
                raise SinkFlushError(exc) from exc
