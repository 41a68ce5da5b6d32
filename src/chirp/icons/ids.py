# topmark:header:start
#
#   project      : Chirp
#   file         : ids.py
#   file_relpath : src/chirp/icons/ids.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Semantic icon identifiers.

`IconId` is a closed set today but is expected to grow. Code that branches on
it must keep a default arm (``case _:``) so new members do not break callers.

Two families exist:
    * plain Unicode glyphs that render in any UTF-8 terminal;
    * ``NF_*`` glyphs that need a patched [Nerd Font](https://www.nerdfonts.com/).
"""

from __future__ import annotations

from chirp.core.enum_mixins import KeyedStrEnum


class IconId(KeyedStrEnum):
    """Identifier of an icon in the [`IconRegistry`][chirp.icons.registry.IconRegistry]."""

    # Value format: (key: str, label: str, aliases: tuple[str, ...])
    CHECK = ("check", "Success check mark", ("success", "ok"))
    CROSS = ("cross", "Failure cross mark", ("error", "fail"))
    INFO = ("info", "Information", ("information",))
    WARNING = ("warning", "Warning sign", ("warn",))
    BUG = ("bug", "Debugging", ("debug",))
    PROCESSING = ("processing", "Work in progress", ("gear",))
    FOLDER = ("folder", "Directory")

    NF_CHECK = ("nf_check", "Success check mark (Nerd Font)")
    NF_CROSS = ("nf_cross", "Failure cross mark (Nerd Font)")
    NF_INFO = ("nf_info", "Information (Nerd Font)")
    NF_WARNING = ("nf_warning", "Warning sign (Nerd Font)")
    NF_BUG = ("nf_bug", "Debugging (Nerd Font)")
    NF_PROCESSING = ("nf_processing", "Work in progress (Nerd Font)", ("nf_gear",))
    NF_FOLDER = ("nf_folder", "Directory (Nerd Font)")
    NF_REFRESH = ("nf_refresh", "Refresh (Nerd Font)")

    @property
    def is_nerd_font(self) -> bool:
        """Whether the glyph needs a Nerd Font to display."""
        return self.value.startswith("nf_")
