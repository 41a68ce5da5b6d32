# topmark:header:start
#
#   project      : Chirp
#   file         : cmd_common.py
#   file_relpath : src/chirp/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared helpers for Chirp CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from chirp.cli.errors import ChirpIOError
from chirp.config.logging import get_logger
from chirp.errors import SinkWriteError
from chirp.sinks import ClickSink

if TYPE_CHECKING:
    from chirp.builder import MessageBuilder
    from chirp.sinks import SinkLike

logger = get_logger(__name__)


def get_sink(ctx: click.Context) -> SinkLike:
    """Return the sink stored on the context, creating a `ClickSink` if missing."""
    ctx.ensure_object(dict)
    sink: SinkLike | None = ctx.obj.get("sink")
    if sink is None:
        sink = ClickSink(enable_color=ctx.obj.get("color_enabled"))
        ctx.obj["sink"] = sink
    return sink


def render_builder(ctx: click.Context, builder: MessageBuilder) -> None:
    """Render ``builder`` to the context sink, mapping sink failures to `ChirpIOError`.

    Args:
        ctx (click.Context): Current Click context (provides sink and color state).
        builder (MessageBuilder): The builder to render; it is consumed.

    Raises:
        ChirpIOError: If the sink rejects a write or flush.
    """
    ctx.ensure_object(dict)
    try:
        builder.render(get_sink(ctx), enable_color=bool(ctx.obj.get("color_enabled", False)))
    except SinkWriteError as exc:
        logger.debug("Render failed: %s", exc)
        raise ChirpIOError(str(exc)) from exc
