# topmark:header:start
#
#   project      : Chirp
#   file         : __init__.py
#   file_relpath : src/chirp/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color primitives used by the Chirp message renderer.

Modules:
    - `colors`: Named `Color` palette and the `colorize()` primitive.
    - `color_mode`: ANSI on/off resolution from flags, environment, and TTY status.
"""

from __future__ import annotations
