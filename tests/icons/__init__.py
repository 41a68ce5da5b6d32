# topmark:header:start
#
#   project      : Chirp
#   file         : __init__.py
#   file_relpath : tests/icons/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end
