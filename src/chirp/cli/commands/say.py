# topmark:header:start
#
#   project      : Chirp
#   file         : say.py
#   file_relpath : src/chirp/cli/commands/say.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chirp `say` command.

Renders one message block: an optional icon followed by the given lines. A
single ``-`` argument reads the lines from STDIN instead.
"""

from __future__ import annotations

import click

from chirp.builder import MessageBuilder
from chirp.cli.cli_types import EnumChoiceParam
from chirp.cli.cmd_common import render_builder
from chirp.icons.ids import IconId
from chirp.rendering.colors import Color


def _read_stdin_lines() -> list[str]:
    """Return STDIN content split into lines (terminators removed)."""
    stream = click.get_text_stream("stdin")
    return stream.read().splitlines()


@click.command(
    name="say",
    help="Print TEXT lines, the first one prefixed by an optional icon. Use '-' to read STDIN.",
)
@click.option(
    "--icon",
    "-i",
    "icon_id",
    type=EnumChoiceParam(IconId),
    default=None,
    help="Leading icon (see 'chirp icons').",
)
@click.option(
    "--message-color",
    "-c",
    "message_color",
    type=EnumChoiceParam(Color),
    default=None,
    help="Color for every line, overriding the icon's default color.",
)
@click.argument("texts", nargs=-1)
@click.pass_context
def say_command(
    ctx: click.Context,
    *,
    icon_id: IconId | None,
    message_color: Color | None,
    texts: tuple[str, ...],
) -> None:
    """Print TEXT lines with an optional icon.

    Args:
        ctx (click.Context): Click context carrying the sink and color state.
        icon_id (IconId | None): Optional leading icon.
        message_color (Color | None): Optional color override for all lines.
        texts (tuple[str, ...]): Lines to print; ``("-",)`` reads STDIN.
    """
    lines: list[str] = _read_stdin_lines() if texts == ("-",) else list(texts)

    builder = MessageBuilder()
    if icon_id is not None:
        builder.icon(icon_id)
    for text in lines:
        builder.message(text, message_color)

    render_builder(ctx, builder)
