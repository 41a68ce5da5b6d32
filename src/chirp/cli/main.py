# topmark:header:start
#
#   project      : Chirp
#   file         : main.py
#   file_relpath : src/chirp/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chirp CLI entry point.

Key ideas:
- Group-level options (verbosity, color) are resolved once and placed into ``ctx.obj``.
- Commands render through a shared sink stored in ``ctx.obj["sink"]``; tests may
  inject their own sink via ``CliRunner.invoke(..., obj={"sink": ...})``.
"""

from __future__ import annotations

import click

from chirp.cli.commands.icons import icons_command
from chirp.cli.commands.say import say_command
from chirp.cli.commands.version import version_command
from chirp.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from chirp.config.logging import get_logger, resolve_env_log_level, setup_logging
from chirp.rendering.color_mode import ColorMode, resolve_color_mode
from chirp.sinks import ClickSink

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Environment wins over flags for internal logging
    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    log_level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(color_mode_override=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj.setdefault("sink", ClickSink(enable_color=enable_color))
    logger.debug("CLI state: log_level=%s color=%s", log_level, enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Chirp: print icon-prefixed, colored status messages.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the Chirp CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'chirp say --icon check TEXT...' to print a message.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(say_command)

cli.add_command(icons_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
