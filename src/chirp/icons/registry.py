# topmark:header:start
#
#   project      : Chirp
#   file         : registry.py
#   file_relpath : src/chirp/icons/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Process-wide icon registry.

Maps every [`IconId`][chirp.icons.ids.IconId] to an
[`IconEntry`][chirp.icons.registry.IconEntry] (glyph + default color).

Notes:
    * The table is built lazily on first access and never mutated afterwards.
    * Initialization is guarded by an `RLock` with a check / lock / re-check
      sequence, so concurrent first callers run exactly one build.
    * Reads after initialization take no lock.
    * `lookup()` is total: ids missing from the table resolve to
      `FALLBACK_ENTRY` instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar, Final

from chirp.config.logging import get_logger
from chirp.icons.ids import IconId
from chirp.rendering.colors import Color

if TYPE_CHECKING:
    from collections.abc import Mapping

    from chirp.config.logging import ChirpLogger

logger: ChirpLogger = get_logger(__name__)


@dataclass(frozen=True)
class IconEntry:
    """Glyph and default display color of an icon.

    Attributes:
        glyph (str): Literal text rendered for the icon (no trailing separator).
        color (Color): Color used when a message line has no explicit override.
    """

    glyph: str
    color: Color


FALLBACK_ENTRY: Final[IconEntry] = IconEntry(glyph="•", color=Color.WHITE)

# Literal icon table. Nerd Font code points: https://www.nerdfonts.com/cheat-sheet
_BUILTIN_ICONS: Final[tuple[tuple[IconId, str, Color], ...]] = (
    (IconId.CHECK, "✓", Color.GREEN),
    (IconId.CROSS, "✗", Color.RED),
    (IconId.INFO, "ℹ", Color.WHITE),
    (IconId.WARNING, "⚠", Color.YELLOW),
    (IconId.BUG, "🐛", Color.YELLOW),
    (IconId.PROCESSING, "⚙", Color.CYAN),
    (IconId.FOLDER, "📁", Color.BLUE),
    (IconId.NF_CHECK, "\uf00c", Color.GREEN),  # nf-fa-check
    (IconId.NF_CROSS, "\uf00d", Color.RED),  # nf-fa-times
    (IconId.NF_INFO, "\uf05a", Color.WHITE),  # nf-fa-info_circle
    (IconId.NF_WARNING, "\uf071", Color.YELLOW),  # nf-fa-warning
    (IconId.NF_BUG, "\uf188", Color.RED),  # nf-fa-bug
    (IconId.NF_PROCESSING, "\uf013", Color.CYAN),  # nf-fa-cog
    (IconId.NF_FOLDER, "\uf07b", Color.BLUE),  # nf-fa-folder
    (IconId.NF_REFRESH, "\uf021", Color.CYAN),  # nf-fa-refresh
)


def _build_table() -> dict[IconId, IconEntry]:
    """Build the id -> entry mapping from the literal table."""
    table: dict[IconId, IconEntry] = {}
    for icon_id, glyph, color in _BUILTIN_ICONS:
        if icon_id in table:
            raise ValueError(f"Duplicate icon id: {icon_id.value}")
        table[icon_id] = IconEntry(glyph=glyph, color=color)
    return table


class IconRegistry:
    """Read-only, lazily initialized view of the icon table.

    All members are class-level; the registry is process-global and is not
    meant to be instantiated.
    """

    _lock: ClassVar[RLock] = RLock()
    _entries: ClassVar[Mapping[IconId, IconEntry] | None] = None
    _build_count: ClassVar[int] = 0

    @classmethod
    def initialize(cls) -> Mapping[IconId, IconEntry]:
        """Build the icon table if it has not been built yet.

        Safe to call from several threads: exactly one build runs, the other
        callers block until it completes and then observe the same table.

        Returns:
            Mapping[IconId, IconEntry]: Read-only view of the table.
        """
        entries = cls._entries
        if entries is not None:
            return entries
        with cls._lock:
            if cls._entries is None:
                cls._entries = MappingProxyType(_build_table())
                cls._build_count += 1
                logger.debug("Icon registry initialized with %d icons", len(cls._entries))
            return cls._entries

    @classmethod
    def is_initialized(cls) -> bool:
        """Return True once the table has been built."""
        return cls._entries is not None

    @classmethod
    def lookup(cls, icon_id: IconId) -> IconEntry:
        """Return the glyph and default color for ``icon_id``.

        Args:
            icon_id (IconId): The icon to resolve.

        Returns:
            IconEntry: The registered entry, or `FALLBACK_ENTRY` if ``icon_id``
            has no entry in the table.
        """
        entry: IconEntry | None = cls.initialize().get(icon_id)
        if entry is None:
            logger.warning("No icon registered for %r; using fallback glyph", icon_id)
            return FALLBACK_ENTRY
        return entry

    @classmethod
    def ids(cls) -> tuple[IconId, ...]:
        """Return all registered icon ids in table order."""
        return tuple(cls.initialize().keys())

    @classmethod
    def as_mapping(cls) -> Mapping[IconId, IconEntry]:
        """Return a read-only mapping of icon entries.

        Notes:
            The returned mapping is a `MappingProxyType` and must not be mutated.
        """
        return cls.initialize()
