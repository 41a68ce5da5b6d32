# topmark:header:start
#
#   project      : Chirp
#   file         : __init__.py
#   file_relpath : src/chirp/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line front end for Chirp."""

from __future__ import annotations
