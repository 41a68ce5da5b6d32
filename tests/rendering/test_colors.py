# topmark:header:start
#
#   project      : Chirp
#   file         : test_colors.py
#   file_relpath : tests/rendering/test_colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named colors and the `colorize` primitive."""

from __future__ import annotations

import pytest

from chirp.rendering.colors import Color, colorize


def test_color_values_are_names() -> None:
    """`Color` values are plain color names."""
    assert Color.RED.value == "red"
    assert str(Color.GRAY) == "gray"


@pytest.mark.parametrize(
    ("color", "code"),
    [
        (Color.RED, 31),
        (Color.GREEN, 32),
        (Color.YELLOW, 33),
        (Color.BLUE, 34),
        (Color.MAGENTA, 35),
        (Color.CYAN, 36),
        (Color.WHITE, 37),
        (Color.GRAY, 90),
    ],
    ids=str,
)
def test_color_emits_basic_ansi_codes(color: Color, code: int) -> None:
    """Each member wraps text in its 16-color ANSI code, whatever stdout is."""
    assert color.color("test") == f"\x1b[{code}mtest\x1b[39m"


def test_colorize_applies_color() -> None:
    """`colorize` delegates to the member's colorizer."""
    assert colorize("hi", Color.GREEN) == "\x1b[32mhi\x1b[39m"


def test_colorize_without_color_is_identity() -> None:
    """No color, or color disabled, returns the text unchanged."""
    assert colorize("hi", None) == "hi"
    assert colorize("hi", Color.GREEN, enable_color=False) == "hi"


def test_parse_color_names() -> None:
    """Names parse case-insensitively; members pass through; unknown is None."""
    assert Color.parse("Yellow") is Color.YELLOW
    assert Color.parse(Color.BLUE) is Color.BLUE
    assert Color.parse("chartreuse") is None
    assert Color.parse(None) is None
