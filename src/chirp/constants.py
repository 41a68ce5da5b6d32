# topmark:header:start
#
#   project      : Chirp
#   file         : constants.py
#   file_relpath : src/chirp/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chirp Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

CHIRP_VERSION: str = get_version("chirp")

# Separator between an icon glyph and the first line of a message:
GLYPH_SEPARATOR: Final[str] = " "

# Prefix of every continuation line (index > 0):
CONTINUATION_INDENT: Final[str] = "  "

LINE_TERMINATOR: Final[str] = "\n"

# Environment variables
ENV_LOG_LEVEL: Final[str] = "CHIRP_LOG_LEVEL"
ENV_FORCE_COLOR: Final[str] = "FORCE_COLOR"
ENV_NO_COLOR: Final[str] = "NO_COLOR"
