"""Translation store: the nested locale -> key tree the resolver reads.

The resolution pipeline depends only on the TranslationStore protocol.
MemoryStore is the in-process implementation: a dict per locale, deep
merged on every store() call, guarded by a readers-writer lock so
concurrent lookups never observe a half-applied merge.

Tree shape:
    {locale: {segment: {segment: value | {plural-category: value}}}}

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Protocol

from i18nengine.locale_utils import canonicalize_locale
from i18nengine.runtime.rwlock import RWLock
from i18nengine.runtime.value_types import Entry, LocaleCode, TranslationTree

__all__ = ["MemoryStore", "TranslationStore", "deep_merge"]

logger = logging.getLogger(__name__)


class TranslationStore(Protocol):
    """Protocol for translation storage backends.

    Implementations must tolerate concurrent lookup() calls. Writes
    (store, reset) may be serialized against reads however the backend
    sees fit.
    """

    def lookup(self, locale: LocaleCode, path: Sequence[str]) -> Entry | None:
        """Return the value at path under locale, or None when absent."""

    def store(self, locale: LocaleCode, data: TranslationTree) -> None:
        """Deep-merge data into the tree of locale."""

    def available_locales(self) -> frozenset[LocaleCode]:
        """Return the locales that have at least one stored translation."""

    def reset(self) -> None:
        """Drop every stored translation."""


def _normalize_tree(data: Mapping[object, object]) -> dict[str, object]:
    """Copy a caller mapping into plain dicts with string keys."""
    return {str(key): _normalize_value(value) for key, value in data.items()}


def _normalize_value(value: object) -> object:
    match value:
        case Mapping():
            return _normalize_tree(value)
        case list() | tuple():
            return [_normalize_value(item) for item in value]
        case _:
            return value


def _detach(value: object) -> object:
    """Copy containers so callers cannot mutate the stored tree."""
    match value:
        case dict():
            return {key: _detach(item) for key, item in value.items()}
        case list():
            return [_detach(item) for item in value]
        case _:
            return value


def deep_merge(target: dict[str, object], data: Mapping[str, object]) -> None:
    """Merge data into target in place.

    Nested mappings merge key by key; any other value (string, list,
    number, or a mapping replacing a leaf) overwrites what was there.
    """
    for key, value in data.items():
        existing = target.get(key)
        if isinstance(existing, dict) and isinstance(value, dict):
            deep_merge(existing, value)
        else:
            target[key] = value


class MemoryStore:
    """In-memory TranslationStore.

    Locale codes are canonicalized (case-insensitive, "_" == "-") for
    storage; available_locales() reports the spelling used by the first
    store() call for that locale.

    Thread-safe via internal RWLock.

    Example:
        >>> store = MemoryStore()
        >>> store.store("en", {"greeting": {"hello": "Hello"}})
        >>> store.lookup("EN", ("greeting", "hello"))
        'Hello'
    """

    __slots__ = ("_lock", "_spellings", "_translations")

    def __init__(self) -> None:
        self._translations: dict[str, dict[str, object]] = {}
        self._spellings: dict[str, LocaleCode] = {}
        self._lock = RWLock()

    def __repr__(self) -> str:
        return f"MemoryStore(locales={sorted(self._spellings.values())!r})"

    def lookup(self, locale: LocaleCode, path: Sequence[str]) -> Entry | None:
        """Walk path through the locale tree.

        Returns None when the locale is unknown, any segment is missing,
        an intermediate value is not a mapping, or the stored value is None.
        An empty path returns the whole locale tree.
        """
        canonical = canonicalize_locale(locale)
        with self._lock.read():
            node: object = self._translations.get(canonical)
            for segment in path:
                if not isinstance(node, dict):
                    return None
                node = node.get(segment)
            return _detach(node)

    def store(self, locale: LocaleCode, data: TranslationTree) -> None:
        """Deep-merge data into the tree of locale.

        Raises:
            InvalidLocale: If locale is not a usable locale code
            TypeError: If data is not a mapping
        """
        canonical = canonicalize_locale(locale)
        if not isinstance(data, Mapping):
            msg = f"Translations for {locale!r} must be a mapping, got {type(data).__name__}"
            raise TypeError(msg)
        normalized = _normalize_tree(data)

        with self._lock.write():
            tree = self._translations.setdefault(canonical, {})
            self._spellings.setdefault(canonical, locale)
            deep_merge(tree, normalized)
        logger.debug("Stored %d top-level keys for locale %s", len(normalized), locale)

    def available_locales(self) -> frozenset[LocaleCode]:
        """Return the locales with stored translations."""
        with self._lock.read():
            return frozenset(self._spellings.values())

    def reset(self) -> None:
        """Drop every stored translation."""
        with self._lock.write():
            self._translations.clear()
            self._spellings.clear()
