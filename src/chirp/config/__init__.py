# topmark:header:start
#
#   project      : Chirp
#   file         : __init__.py
#   file_relpath : src/chirp/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration helpers for Chirp (logging, environment)."""

from __future__ import annotations
