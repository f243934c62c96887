"""Key normalization: key + scope -> tuple of path segments.

"currency.format" and ("currency", "format") address the same entry.
Scopes are prepended and split the same way, so
scope="activerecord.errors", key="blank" looks up
("activerecord", "errors", "blank").

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence

from i18nengine.constants import DEFAULT_SEPARATOR
from i18nengine.runtime.value_types import Key, KeyRef

__all__ = ["key_path", "split_segments"]


def split_segments(part: object, separator: str = DEFAULT_SEPARATOR) -> list[str]:
    """Split one key or scope component into path segments.

    Strings are split on separator (empty segments dropped); tuples and
    lists contribute each element split the same way; KeyRef contributes
    its referenced key; anything else is converted with str().
    """
    match part:
        case None:
            return []
        case KeyRef(key=inner):
            return split_segments(inner, separator)
        case str():
            return [segment for segment in part.split(separator) if segment]
        case tuple() | list():
            segments: list[str] = []
            for item in part:
                segments.extend(split_segments(item, separator))
            return segments
        case _:
            return [str(part)]


def key_path(
    key: Key,
    scope: str | Sequence[str] | None = None,
    separator: str = DEFAULT_SEPARATOR,
) -> tuple[str, ...]:
    """Build the full lookup path for key under scope.

    Args:
        key: Dotted key, tuple of segments, or KeyRef
        scope: Optional dotted scope or sequence of scope segments
        separator: Segment separator (default ".")

    Returns:
        Tuple of path segments, scope first

    Raises:
        ValueError: If key yields no segments

    Example:
        >>> key_path("formats.short", scope="date")
        ('date', 'formats', 'short')
    """
    key_segments = split_segments(key, separator)
    if not key_segments:
        msg = f"Translation key must not be empty, got {key!r}"
        raise ValueError(msg)
    return (*split_segments(scope, separator), *key_segments)
