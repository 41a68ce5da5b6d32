# topmark:header:start
#
#   project      : Chirp
#   file         : errors.py
#   file_relpath : src/chirp/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Chirp CLI.

Library errors ([`chirp.errors`][chirp.errors]) are converted into these at the
command boundary so Click prints a message and exits with a `sysexits` code.
"""

from __future__ import annotations

import click

from chirp.cli.exit_codes import ExitCode


class ChirpCliError(click.ClickException):
    """Base class for all Chirp CLI errors."""

    exit_code = ExitCode.FAILURE


class ChirpUsageError(ChirpCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ChirpIOError(ChirpCliError):
    """Error for failed writes to the output stream."""

    exit_code = ExitCode.IO_ERROR
