# topmark:header:start
#
#   project      : Chirp
#   file         : __init__.py
#   file_relpath : src/chirp/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chirp CLI subcommands."""

from __future__ import annotations
