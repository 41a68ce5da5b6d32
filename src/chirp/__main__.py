# topmark:header:start
#
#   project      : Chirp
#   file         : __main__.py
#   file_relpath : src/chirp/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry point for running Chirp as a module (``python -m chirp``)."""

from chirp.cli.main import cli

if __name__ == "__main__":
    cli()
