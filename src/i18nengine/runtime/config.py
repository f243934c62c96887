"""Resolver configuration.

A single frozen dataclass holding the knobs of the resolution pipeline,
shared by TranslationResolver and the I18n facade.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from i18nengine.constants import DEFAULT_SEPARATOR
from i18nengine.runtime.pluralizer import PluralRule, english_plural_rule

__all__ = ["ResolverConfig"]


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Immutable configuration for TranslationResolver.

    Attributes:
        separator: Splits dotted keys and scopes into segments (default ".").
        plural_rule: Maps (locale, count) to a plural category
            (default: english_plural_rule).

    Example:
        >>> from i18nengine.runtime.pluralizer import cldr_plural_rule
        >>> config = ResolverConfig(plural_rule=cldr_plural_rule)
        >>> resolver = TranslationResolver(MemoryStore(), config)
    """

    separator: str = DEFAULT_SEPARATOR
    plural_rule: PluralRule = english_plural_rule

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If separator is empty or whitespace.
            TypeError: If plural_rule is not callable.
        """
        if not self.separator or self.separator.isspace():
            msg = f"separator must be a non-blank string, got {self.separator!r}"
            raise ValueError(msg)
        if not callable(self.plural_rule):
            msg = f"plural_rule must be callable, got {type(self.plural_rule).__name__}"
            raise TypeError(msg)
