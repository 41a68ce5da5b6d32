# topmark:header:start
#
#   project      : Chirp
#   file         : __init__.py
#   file_relpath : src/chirp/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UI-agnostic core helpers shared by the Chirp modules."""

from __future__ import annotations
