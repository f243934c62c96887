"""Locale utilities: validation, canonical store keys, and Babel conversion.

Locale codes are case-insensitive tags ("es-MX", "es_mx", "ES-mx" are the
same locale). Normalize at the system boundary with canonicalize_locale(),
then use the canonical form for store keys and comparisons.

Python 3.13+.
"""

from __future__ import annotations

import functools
from collections.abc import Iterable
from typing import TYPE_CHECKING

from i18nengine.diagnostics import InvalidLocale

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "canonicalize_locale",
    "get_babel_locale",
    "normalize_locale",
    "normalize_locales",
    "validate_locale",
]


def validate_locale(locale_code: object) -> str:
    """Check that a locale code is usable for lookup.

    Args:
        locale_code: Candidate locale code

    Returns:
        The locale code unchanged

    Raises:
        InvalidLocale: If not a string, empty, or containing whitespace
    """
    if not isinstance(locale_code, str) or not locale_code:
        raise InvalidLocale(locale_code)
    if any(ch.isspace() for ch in locale_code):
        raise InvalidLocale(locale_code)
    return locale_code


def canonicalize_locale(locale_code: str) -> str:
    """Return the canonical store key for a locale code.

    Lower case with hyphen separators.

    Example:
        >>> canonicalize_locale("es_MX")
        'es-mx'
        >>> canonicalize_locale("EN")
        'en'
    """
    return validate_locale(locale_code).replace("_", "-").lower()


def normalize_locales(locales: str | Iterable[str] | None) -> tuple[str, ...]:
    """Turn a locale or locale list into a validated fallback chain.

    A single string is a one-element chain. Duplicates (compared
    canonically) are dropped, keeping the first occurrence and its
    original spelling.

    Raises:
        InvalidLocale: If locales is None, empty, or has an invalid entry
    """
    if locales is None:
        raise InvalidLocale(locales)
    if isinstance(locales, str):
        return (validate_locale(locales),)

    chain: dict[str, str] = {}
    for locale in locales:
        chain.setdefault(canonicalize_locale(locale), locale)
    if not chain:
        raise InvalidLocale(locales)
    return tuple(chain.values())


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result, avoiding repeated
    parsing in plural rule selection.

    Thread-safe via lru_cache internal locking.

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))
