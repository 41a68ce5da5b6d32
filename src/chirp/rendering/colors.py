# topmark:header:start
#
#   project      : Chirp
#   file         : colors.py
#   file_relpath : src/chirp/rendering/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named foreground colors and the `colorize` primitive.

`Color` members carry a yachalk style as their colorizer. `colorize()` is the
single place where Chirp turns text into styled text; everything else passes
colors around by name.

Notes:
    The styles come from a private `ChalkFactory` pinned to 16-color ANSI
    rather than from the global ``yachalk.chalk``, whose mode is detected once
    from ``sys.stdout`` at import time. Whether to style at all is decided by
    the ``enable_color`` argument of `colorize()` and nothing else.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Final

from yachalk import ChalkFactory, ColorMode

Colorizer = Callable[[str], str]

_ANSI16: Final[ChalkFactory] = ChalkFactory(ColorMode.Basic16)


class Color(str, Enum):
    """Foreground colors available to icons and message lines.

    The member value is the color name; `.color` is the bound colorizer.
    """

    _value_: str
    _colorizer: Colorizer

    # Value format: (color name: str, colorizer: Colorizer)
    RED = ("red", _ANSI16.red)
    GREEN = ("green", _ANSI16.green)
    YELLOW = ("yellow", _ANSI16.yellow)
    BLUE = ("blue", _ANSI16.blue)
    MAGENTA = ("magenta", _ANSI16.magenta)
    CYAN = ("cyan", _ANSI16.cyan)
    WHITE = ("white", _ANSI16.white)
    GRAY = ("gray", _ANSI16.gray)

    def __new__(cls, name: str, colorizer: Colorizer) -> Color:
        obj = str.__new__(cls, name)
        obj._value_ = name
        obj._colorizer = colorizer
        return obj

    def __str__(self) -> str:
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Colorizer that wraps a string in this color's ANSI codes."""
        return self._colorizer

    @classmethod
    def parse(cls, raw: str | Color | None) -> Color | None:
        """Return the color named by ``raw`` (case-insensitive), or ``None``.

        Args:
            raw (str | Color | None): A `Color` member, a color name such as
                ``"green"``, or ``None``.

        Returns:
            Color | None: The matching member, or ``None`` if ``raw`` is ``None`` or unknown.
        """
        if raw is None or isinstance(raw, Color):
            return raw
        return cls.__members__.get(raw.strip().upper())


def colorize(text: str, color: Color | None, *, enable_color: bool = True) -> str:
    """Wrap ``text`` in the ANSI style of ``color``.

    Args:
        text (str): Text to decorate.
        color (Color | None): Foreground color; ``None`` leaves the text unchanged.
        enable_color (bool): When False, return ``text`` unchanged.

    Returns:
        str: The styled text, or ``text`` itself when no styling applies.
    """
    if color is None or not enable_color:
        return text
    return color.color(text)
