# topmark:header:start
#
#   project      : Chirp
#   file         : enum_mixins.py
#   file_relpath : src/chirp/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enum helpers shared by Chirp's identifier types.

Provided:
    - ``norm_token(s)``: normalize user input (``"Nf-Bug"`` -> ``"nf_bug"``).
    - ``KeyedStrEnum``: ``str`` Enum carrying a human label and parse aliases.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterator

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def norm_token(s: str) -> str:
    """Normalize an identifier-like string to match enum keys and aliases."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """``str`` Enum whose value is a lowercase machine key.

    Members are declared as ``(key, label)`` or ``(key, label, aliases)``.

    Attributes:
        label (str): Human-readable description, shown by ``chirp icons``.
        aliases (tuple[str, ...]): Extra tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(cls, key: str, label: str, aliases: tuple[str, ...] = ()) -> KeyedStrEnum:
        obj = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = aliases
        return obj

    def __str__(self) -> str:
        return self.value

    def _tokens(self) -> Iterator[str]:
        yield norm_token(self.value)
        yield norm_token(self.name)
        for alias in self.aliases:
            yield norm_token(alias)

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Return the member whose key, name, or alias matches ``raw``.

        Matching ignores case and treats ``-`` and spaces like ``_``.

        Args:
            raw (str | None): User-supplied token.

        Returns:
            _KS | None: The matching member, or ``None`` if nothing matches.
        """
        if raw is None:
            return None
        token: str = norm_token(raw)
        return next((m for m in cls if token in m._tokens()), None)
