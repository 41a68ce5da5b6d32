# topmark:header:start
#
#   project      : Chirp
#   file         : color_mode.py
#   file_relpath : src/chirp/rendering/color_mode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent color-mode resolution for Chirp.

Decides whether a render should emit ANSI styles at all. This is the only
terminal capability Chirp cares about: "supports ANSI or not".

These helpers are kept Click-free so they can be used by the builder, the CLI
front end, and tests alike.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from chirp.config.logging import get_logger
from chirp.constants import ENV_FORCE_COLOR, ENV_NO_COLOR

if TYPE_CHECKING:
    from chirp.config.logging import ChirpLogger


logger: ChirpLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when the sink is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.

    Example:
        >>> resolve_color_mode(color_mode_override=ColorMode.NEVER)
        False
        >>> resolve_color_mode(color_mode_override=None, stdout_isatty=True)
        True
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None = None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Override**: `ALWAYS` → True; `NEVER` → False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        3. **Auto**: return the TTY status of the output.

    Args:
        color_mode_override (ColorMode | None): Explicit mode; `None` or `AUTO` defer
            to the environment and TTY detection.
        stdout_isatty (bool | None): Optional override for TTY detection. When `None`,
            the function calls `sys.stdout.isatty()` and falls back to `False` on error.

    Returns:
        bool: True if ANSI color should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv(ENV_FORCE_COLOR)
    if force_color and force_color != "0":
        logger.trace("Color forced on by %s=%s", ENV_FORCE_COLOR, force_color)
        return True
    if os.getenv(ENV_NO_COLOR) is not None:
        logger.trace("Color disabled by %s", ENV_NO_COLOR)
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)
