"""Default specifications and their resolution.

The ``default=`` option of translate() accepts four shapes, parsed once
into a closed set of variants:

    "Literal text"                  -> LiteralDefault
    ref("other.key")                -> KeyDefault
    [ref("a"), ref("b"), "Literal"] -> ChainDefault (first success wins)
    {"en": ..., "es": ...}          -> LocaleDefault (exact locale match)

Values inside a locale mapping may be a literal, a key reference, or a
sequence of those; deeper nesting is rejected. Nested sequences at the top
level are flattened into one chain.

Resolution returns Found(value) or NOT_FOUND; a missing key reference is
an ordinary NOT_FOUND result, never an exception.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Final

from i18nengine.core import DepthGuard
from i18nengine.diagnostics import InvalidDefaultSpec, InvalidLocale
from i18nengine.locale_utils import canonicalize_locale
from i18nengine.runtime.value_types import KeyRef, LocaleCode

__all__ = [
    "NOT_FOUND",
    "ChainDefault",
    "DefaultResult",
    "DefaultSpec",
    "Found",
    "KeyDefault",
    "LiteralDefault",
    "LocaleDefault",
    "NotFound",
    "parse_default",
    "resolve_default",
    "split_default",
]


@dataclass(frozen=True, slots=True)
class LiteralDefault:
    """Untranslated text used as-is."""

    text: str


@dataclass(frozen=True, slots=True)
class KeyDefault:
    """Another key, looked up in the locale being tried."""

    key: KeyRef


@dataclass(frozen=True, slots=True)
class ChainDefault:
    """Ordered alternatives; the first one that resolves wins."""

    alternatives: tuple[LiteralDefault | KeyDefault | LocaleDefault, ...]


@dataclass(frozen=True, slots=True)
class LocaleDefault:
    """Per-locale defaults keyed by canonical locale code."""

    by_locale: Mapping[str, LiteralDefault | KeyDefault | ChainDefault]


type DefaultSpec = LiteralDefault | KeyDefault | ChainDefault | LocaleDefault


@dataclass(frozen=True, slots=True)
class Found:
    """A default alternative produced a value."""

    value: object


class NotFound:
    """No default alternative produced a value."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False


NOT_FOUND: Final = NotFound()

type DefaultResult = Found | NotFound

type KeyLookup = Callable[[LocaleCode, KeyRef], object | None]
"""Evaluates a key reference for one locale; None means absent."""


def parse_default(value: object, *, guard: DepthGuard | None = None) -> DefaultSpec | None:
    """Parse a ``default=`` option into a DefaultSpec.

    Args:
        value: User-supplied default (None, str, KeyRef, sequence, mapping)
        guard: Depth guard for nested sequences (created if omitted)

    Returns:
        Parsed specification, or None when value is None

    Raises:
        InvalidDefaultSpec: If value (or a nested part) has an unsupported shape
        DepthLimitExceededError: If sequences nest deeper than MAX_DEPTH
    """
    guard = guard if guard is not None else DepthGuard()
    match value:
        case None:
            return None
        case str():
            return LiteralDefault(value)
        case KeyRef():
            return KeyDefault(value)
        case Mapping():
            return _parse_locale_mapping(value)
        case list() | tuple():
            return ChainDefault(tuple(_flatten_chain(value, guard)))
        case _:
            raise InvalidDefaultSpec(value, f"unsupported type {type(value).__name__}")


def _flatten_chain(
    items: list[object] | tuple[object, ...], guard: DepthGuard
) -> list[LiteralDefault | KeyDefault | LocaleDefault]:
    flat: list[LiteralDefault | KeyDefault | LocaleDefault] = []
    with guard:
        for item in items:
            match item:
                case None:
                    continue
                case list() | tuple():
                    flat.extend(_flatten_chain(item, guard))
                case str():
                    flat.append(LiteralDefault(item))
                case KeyRef():
                    flat.append(KeyDefault(item))
                case Mapping():
                    flat.append(_parse_locale_mapping(item))
                case _:
                    raise InvalidDefaultSpec(item, f"unsupported type {type(item).__name__}")
    return flat


def _parse_locale_mapping(value: Mapping[object, object]) -> LocaleDefault:
    by_locale: dict[str, LiteralDefault | KeyDefault | ChainDefault] = {}
    for locale, locale_value in value.items():
        try:
            canonical = canonicalize_locale(str(locale))
        except InvalidLocale as e:
            raise InvalidDefaultSpec(value, f"invalid locale key {locale!r}") from e
        by_locale.setdefault(canonical, _parse_locale_value(locale_value))
    return LocaleDefault(by_locale)


def _parse_locale_value(value: object) -> LiteralDefault | KeyDefault | ChainDefault:
    match value:
        case str():
            return LiteralDefault(value)
        case KeyRef():
            return KeyDefault(value)
        case list() | tuple():
            alternatives: list[LiteralDefault | KeyDefault | LocaleDefault] = []
            for item in value:
                match item:
                    case str():
                        alternatives.append(LiteralDefault(item))
                    case KeyRef():
                        alternatives.append(KeyDefault(item))
                    case _:
                        raise InvalidDefaultSpec(
                            value, "locale default sequences may hold only strings and refs"
                        )
            return ChainDefault(tuple(alternatives))
        case _:
            raise InvalidDefaultSpec(value, f"unsupported locale default {type(value).__name__}")


def split_default(
    spec: DefaultSpec | None,
) -> tuple[tuple[KeyDefault | LocaleDefault, ...], LiteralDefault | None]:
    """Separate translated alternatives from the literal fallback.

    The literal is tried only after every locale in the fallback chain has
    been exhausted, so a key reference resolvable in a less preferred
    locale outranks untranslated text. Only the first top-level literal is
    kept.

    Returns:
        (alternatives in order, first literal or None)
    """
    match spec:
        case None:
            return (), None
        case LiteralDefault():
            return (), spec
        case KeyDefault() | LocaleDefault():
            return (spec,), None
        case ChainDefault(alternatives=alternatives):
            literal = next((a for a in alternatives if isinstance(a, LiteralDefault)), None)
            others = tuple(a for a in alternatives if not isinstance(a, LiteralDefault))
            return others, literal


def resolve_default(
    locale: LocaleCode,
    spec: DefaultSpec | None,
    lookup: KeyLookup,
) -> DefaultResult:
    """Evaluate spec for one locale.

    Args:
        locale: Locale currently being tried
        spec: Parsed default specification
        lookup: Evaluates key references for locale

    Returns:
        Found(value) for the first alternative that resolves, else NOT_FOUND
    """
    match spec:
        case None:
            return NOT_FOUND
        case LiteralDefault(text=text):
            return Found(text)
        case KeyDefault(key=key):
            value = lookup(locale, key)
            return NOT_FOUND if value is None else Found(value)
        case ChainDefault(alternatives=alternatives):
            for alternative in alternatives:
                result = resolve_default(locale, alternative, lookup)
                if isinstance(result, Found):
                    return result
            return NOT_FOUND
        case LocaleDefault(by_locale=by_locale):
            return resolve_default(locale, by_locale.get(canonicalize_locale(locale)), lookup)
