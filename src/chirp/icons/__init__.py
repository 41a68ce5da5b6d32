# topmark:header:start
#
#   project      : Chirp
#   file         : __init__.py
#   file_relpath : src/chirp/icons/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Icon identifiers and the process-wide icon registry."""

from __future__ import annotations

from chirp.icons.ids import IconId
from chirp.icons.registry import FALLBACK_ENTRY, IconEntry, IconRegistry

__all__ = [
    "FALLBACK_ENTRY",
    "IconEntry",
    "IconId",
    "IconRegistry",
]
