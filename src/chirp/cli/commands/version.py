# topmark:header:start
#
#   project      : Chirp
#   file         : version.py
#   file_relpath : src/chirp/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chirp `version` command.

Prints the current Chirp version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from chirp.builder import MessageBuilder
from chirp.cli.cmd_common import render_builder
from chirp.constants import CHIRP_VERSION


@click.command(
    name="version",
    help="Show the current version of Chirp.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Show the current version of Chirp."""
    render_builder(ctx, MessageBuilder().message(CHIRP_VERSION))
