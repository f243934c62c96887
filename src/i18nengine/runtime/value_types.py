"""Value types shared by the runtime: keys, entries, options.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal

__all__ = [
    "Count",
    "Entry",
    "Key",
    "KeyRef",
    "LocaleCode",
    "Options",
    "TranslationTree",
    "ref",
]

type LocaleCode = str
"""Locale tag (e.g., 'en', 'es-MX'); case-insensitive."""

type Entry = str | Mapping[str, object] | Sequence[object] | int | float | bool
"""Value stored at a key path: string, sub-tree / plural mapping, list, or scalar."""

type TranslationTree = Mapping[str, object]
"""Nested mapping of segment -> Entry for one locale."""

type Options = Mapping[str, object]
"""translate() options: count, scope, default, plus interpolation values."""

type Count = int | float | Decimal
"""Number driving plural category selection."""


@dataclass(frozen=True, slots=True)
class KeyRef:
    """Reference to another translation key.

    Used inside default specifications to mean "look this key up" rather
    than "use this text literally". Also accepted anywhere a key is.

    Attributes:
        key: Dotted key string or tuple of segments
    """

    key: str | tuple[str, ...]

    def __post_init__(self) -> None:
        if isinstance(self.key, list):
            object.__setattr__(self, "key", tuple(self.key))
        if not self.key:
            msg = "KeyRef requires a non-empty key"
            raise ValueError(msg)

    def __str__(self) -> str:
        if isinstance(self.key, tuple):
            return ".".join(self.key)
        return self.key


def ref(key: str | Sequence[str]) -> KeyRef:
    """Build a key reference for use in ``default=``.

    Example:
        >>> i18n.translate("missing", default=[ref("fallback"), "Literal"])
    """
    if isinstance(key, str):
        return KeyRef(key)
    return KeyRef(tuple(key))


type Key = str | tuple[str, ...] | KeyRef
"""Single translation key: dotted string, segment tuple, or KeyRef."""
