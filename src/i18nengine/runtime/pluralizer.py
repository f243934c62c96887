"""Plural variant selection for count-indexed entries.

An entry such as {"zero": "no files", "one": "1 file", "other": "{{count}} files"}
is reduced to one variant when translate() receives count. Category
selection is a pluggable PluralRule:

- english_plural_rule (default): "one" for 1, "other" for everything else
- cldr_plural_rule: Babel's CLDR rules for the resolved locale

Independent of the rule, "zero" wins for count == 0 whenever the entry
defines it.

Python 3.13+. cldr_plural_rule depends on Babel for CLDR data.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from decimal import Decimal

from babel.core import UnknownLocaleError

from i18nengine.diagnostics import InvalidPluralizationData
from i18nengine.enums import PluralCategory
from i18nengine.locale_utils import get_babel_locale
from i18nengine.runtime.value_types import Count, LocaleCode

__all__ = [
    "PluralRule",
    "cldr_plural_rule",
    "english_plural_rule",
    "is_count",
    "pluralize",
]

type PluralRule = Callable[[LocaleCode, Count], str]
"""Maps (locale, count) to a plural category name."""


def english_plural_rule(locale: LocaleCode, count: Count) -> str:  # noqa: ARG001
    """Two-way English rule: "one" for exactly 1, "other" otherwise."""
    return PluralCategory.ONE if count == 1 else PluralCategory.OTHER


def cldr_plural_rule(locale: LocaleCode, count: Count) -> str:
    """Select the CLDR plural category for count in locale.

    Unknown or unparsable locales degrade to english_plural_rule.

    Examples:
        >>> cldr_plural_rule("ru", 5)
        'many'
        >>> cldr_plural_rule("ar", 2)
        'two'
        >>> cldr_plural_rule("ja", 1)
        'other'
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        return english_plural_rule(locale, count)
    return locale_obj.plural_form(count)


def pluralize(
    entry: object,
    count: Count | None,
    *,
    locale: LocaleCode,
    rule: PluralRule = english_plural_rule,
) -> object:
    """Pick the variant of entry selected by count.

    Args:
        entry: Resolved entry; only mappings are treated as plural data
        count: Count option, or None when the caller passed none
        locale: Resolved locale, handed to the plural rule
        rule: Plural category policy

    Returns:
        The selected variant, or entry unchanged when it is not a mapping
        or count is None

    Raises:
        InvalidPluralizationData: If the selected category is absent
    """
    if count is None or not isinstance(entry, Mapping):
        return entry

    if count == 0 and PluralCategory.ZERO in entry:
        category = PluralCategory.ZERO
    else:
        category = rule(locale, count)

    if category not in entry:
        raise InvalidPluralizationData(entry, count)
    return entry[category]


def is_count(value: object) -> bool:
    """True for values usable as a count (bool excluded)."""
    return isinstance(value, int | float | Decimal) and not isinstance(value, bool)
