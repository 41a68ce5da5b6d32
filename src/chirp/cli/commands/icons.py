# topmark:header:start
#
#   project      : Chirp
#   file         : icons.py
#   file_relpath : src/chirp/cli/commands/icons.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chirp `icons` command.

Lists every registered icon, one rendered message per icon, so the output
doubles as a visual check of glyphs and colors in the current terminal font.
"""

from __future__ import annotations

from enum import Enum

import click

from chirp.builder import MessageBuilder
from chirp.cli.cli_types import EnumChoiceParam
from chirp.cli.cmd_common import render_builder
from chirp.icons.registry import IconRegistry


class IconFamily(str, Enum):
    """Subset of icons to list."""

    ALL = "all"
    UNICODE = "unicode"
    NERD_FONT = "nerd-font"


@click.command(
    name="icons",
    help="List available icons with their glyph and default color.",
)
@click.option(
    "--family",
    "family",
    type=EnumChoiceParam(IconFamily),
    default=IconFamily.ALL.value,
    help=f"Icon family ({', '.join(v.value for v in IconFamily)}).",
)
@click.pass_context
def icons_command(ctx: click.Context, *, family: IconFamily) -> None:
    """List available icons.

    Args:
        ctx (click.Context): Click context carrying the sink and color state.
        family (IconFamily): Which icons to list.
    """
    width: int = max(len(icon_id.value) for icon_id in IconRegistry.ids())
    for icon_id, entry in IconRegistry.as_mapping().items():
        if family == IconFamily.UNICODE and icon_id.is_nerd_font:
            continue
        if family == IconFamily.NERD_FONT and not icon_id.is_nerd_font:
            continue
        builder = MessageBuilder().icon(icon_id)
        builder.message(f"{icon_id.value:<{width}}  {entry.color.value:<7}  {icon_id.label}")
        render_builder(ctx, builder)
